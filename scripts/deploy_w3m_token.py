import logging

from brownie import W3MToken

from scripts.helpful_scripts import (
    get_account,
    should_verify,
    wait_for_propagation,
    whole_tokens,
)

logging.basicConfig()
logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

# front-end wallet that receives test tokens on deploy
FRONTEND = "0xAeBA2186EAC2f19a884BfD57B871632FE81cFE97"
FRONTEND_ALLOCATION = whole_tokens(10_000_000)


def main():
    """Token-only deployment. Not part of the default run: `brownie run deploy_w3m_token`."""
    deployer = get_account()

    wait_for_propagation(10)

    token = W3MToken.deploy({"from": deployer}, publish_source=should_verify())

    wait_for_propagation(5)
    token.transfer(FRONTEND, FRONTEND_ALLOCATION, {"from": deployer})
    logger.info("Balance of address is: %s", token.balanceOf(FRONTEND))

    return token
