"""
Pytest configuration for token facade tests

Fixtures for the operator account, the recording protocol client and the
facade under test.
"""

import pytest

from hiero_tokens import FungibleTokenClient
from hiero_tokens.data import Account, AccountId, PrivateKey
from tests.factories import ED25519_DER_HEX, AccountFactory, TokenFactory
from tests.mocks import MockProtocolLayerClient


@pytest.fixture
def operator_account() -> Account:
    """Operator account bound to the facade"""
    return Account(account_id=AccountId(shard=0, realm=0, num=2), private_key=PrivateKey.from_string(ED25519_DER_HEX))


@pytest.fixture
def other_account() -> Account:
    """Second account for explicit treasury/sender/association tests"""
    return AccountFactory.create_account(num=5005)


@pytest.fixture
def receiver_account_id() -> AccountId:
    """Account receiving transfers"""
    return AccountFactory.create_account_id(num=6006)


@pytest.fixture
def token_id():
    """An existing token"""
    return TokenFactory.create_token_id(num=4242)


@pytest.fixture
def protocol_client() -> MockProtocolLayerClient:
    """Recording protocol layer client"""
    return MockProtocolLayerClient()


@pytest.fixture
def token_client(protocol_client, operator_account) -> FungibleTokenClient:
    """Facade under test"""
    return FungibleTokenClient(protocol_client, operator_account)
