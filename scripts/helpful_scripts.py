import logging
import os
import time

from brownie import accounts, config, network
from web3 import Web3

logger = logging.getLogger(__name__)

LOCAL_BLOCKCHAIN_ENVIRONMENTS = ["development", "ganache-local", "hardhat"]
DEPLOYER_ACCOUNT_ID = "dep"


def is_local_network():
    return network.show_active() in LOCAL_BLOCKCHAIN_ENVIRONMENTS


def get_account():
    """
    Dev chains use the pre-funded accounts[0]. Live networks use PRIVATE_KEY
    from the environment (brownie loads .env), falling back to the "dep"
    keystore account.
    """
    if is_local_network():
        return accounts[0]
    private_key = os.getenv("PRIVATE_KEY")
    if private_key:
        return accounts.add(private_key)
    return accounts.load(DEPLOYER_ACCOUNT_ID)


def should_verify():
    if is_local_network():
        return False
    network_config = config["networks"].get(network.show_active(), {})
    return bool(network_config.get("verify", False))


def wait_for_propagation(seconds):
    logger.info("Waiting %s seconds for the network to catch up", seconds)
    time.sleep(seconds)


def whole_tokens(amount):
    return Web3.to_wei(amount, "ether")
