from brownie import accounts
import pytest

from scripts import helpful_scripts


@pytest.fixture(autouse=True)
def isolation(fn_isolation):
    pass


@pytest.fixture(autouse=True)
def sleeps(monkeypatch):
    calls = []
    monkeypatch.setattr(helpful_scripts.time, "sleep", calls.append)
    return calls


@pytest.fixture
def live_network(monkeypatch):
    monkeypatch.setattr(helpful_scripts.network, "show_active", lambda: "goerli")


@pytest.fixture
def live_key(monkeypatch, live_network):
    # well-known test key, address derived from private key 1
    monkeypatch.setenv(
        "PRIVATE_KEY", "0x0000000000000000000000000000000000000000000000000000000000000001"
    )
    address = "0x7E5F4552091A69125d5DfCb7b8C2659029395Bdf"
    yield address
    # accounts.add() outlives chain isolation
    for account in [i for i in accounts if i.address == address]:
        accounts.remove(account)
