import logging

from brownie import StakingContract, W3MToken

from scripts.helpful_scripts import (
    get_account,
    should_verify,
    wait_for_propagation,
    whole_tokens,
)

logging.basicConfig()
logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

INVESTOR = "0x350441F8a82680a785FFA9d3EfEa60BB4cA417f8"
OWNER = "0x498C47066AdeB22Ba23953d890eD6b540411e350"

INVESTOR_ALLOCATION = whole_tokens(10_000_000)
REWARDS_ALLOCATION = whole_tokens(100_000_000)
OWNER_ALLOCATION = whole_tokens(100_000_000)


def main():
    deployer = get_account()
    verify = should_verify()

    wait_for_propagation(1)

    staking_contract = StakingContract.deploy({"from": deployer}, publish_source=verify)
    logger.info("Deployer address: %s", deployer.address)
    logger.info("Smart contract address: %s", staking_contract.address)

    token = W3MToken.deploy({"from": deployer}, publish_source=verify)

    staking_contract.updateW3MTokenAddress(token.address, {"from": deployer})

    token.transfer(INVESTOR, INVESTOR_ALLOCATION, {"from": deployer})
    logger.info("Balance of investor address is: %s", token.balanceOf(INVESTOR))

    staking_contract.addToWhiteList(INVESTOR, {"from": deployer})
    staking_contract.addToWhiteList(OWNER, {"from": deployer})

    # reward pool held by the staking contract
    token.transfer(staking_contract.address, REWARDS_ALLOCATION, {"from": deployer})
    # owner keeps a reserve to top the reward pool up
    token.transfer(OWNER, OWNER_ALLOCATION, {"from": deployer})

    staking_contract.transferOwnership(OWNER, {"from": deployer})

    return staking_contract, token
