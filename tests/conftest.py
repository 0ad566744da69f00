import asyncio
import os

import pytest

# Configuration is read at import time, so it must be in place first.
os.environ.setdefault("PRIVATE_KEY", "0x" + "11" * 32)
os.environ.setdefault("STREAMS_CONTRACT_ADDRESS", "0x" + "22" * 20)
os.environ.setdefault("PUBLISHER_WALLET", "0x" + "33" * 20)
os.environ["SCHEMA_WARMUP"] = "false"

from fastapi.testclient import TestClient  # noqa: E402

from streamboard.app import create_app  # noqa: E402
from streamboard.chain import AlreadyRegistered, SchemaEncoder  # noqa: E402
from streamboard.dependencies import (  # noqa: E402
    get_chain_client,
    get_player_encoder,
    get_publisher,
    get_schema_initializer,
    get_streams_client,
)
from streamboard.services.schema import PLAYER_SCHEMA, SchemaInitializer  # noqa: E402

SCHEMA_ID = "0x" + "ab" * 32
WALLET = "0x" + "44" * 20
PUBLISHER = "0x" + "33" * 20
ALICE = "0x" + "aa" * 20
BOB = "0x" + "bb" * 20


class FakeChain:
    def __init__(self, balance=0):
        self.address = WALLET
        self.balance = balance
        self.balance_error = None
        self.receipts = []
        self.receipt_error = None

    async def get_balance(self, address=None):
        if self.balance_error:
            raise self.balance_error
        return self.balance

    async def wait_for_receipt(self, tx_hash):
        await asyncio.sleep(0)
        if self.receipt_error:
            raise self.receipt_error
        self.receipts.append(tx_hash)
        return {"transactionHash": tx_hash, "status": 1}


class FakeStreams:
    def __init__(self):
        self.schema_id = SCHEMA_ID
        self.compute_calls = 0
        self.compute_errors = []
        self.register_calls = []
        self.outcome = AlreadyRegistered()
        self.writes = []
        self.tx_hash = "0x" + "cd" * 32
        self.set_error = None
        self.records = []
        self.read_error = None
        self.reads = []

    async def compute_schema_id(self, schema):
        self.compute_calls += 1
        await asyncio.sleep(0)
        if self.compute_errors:
            raise self.compute_errors.pop(0)
        return self.schema_id

    async def register_data_schemas(self, registrations, ignore_registered=True):
        self.register_calls.append((list(registrations), ignore_registered))
        await asyncio.sleep(0)
        return self.outcome

    async def set(self, streams):
        if self.set_error:
            raise self.set_error
        self.writes.extend(streams)
        return self.tx_hash

    async def get_all_publisher_data_for_schema(self, schema_id, publisher, encoder):
        self.reads.append((schema_id, publisher))
        if self.read_error:
            raise self.read_error
        return self.records


def score_record(player, score):
    """A decoded record in the wrapped shape the streams client returns."""

    return SchemaEncoder(PLAYER_SCHEMA).decode_data(
        SchemaEncoder(PLAYER_SCHEMA).encode_data(
            [
                {"name": "player", "value": player, "type": "address"},
                {"name": "score", "value": score, "type": "uint256"},
            ]
        )
    )


@pytest.fixture()
def fake_chain():
    return FakeChain(balance=1_500_000_000_000_000_000)


@pytest.fixture()
def fake_streams():
    return FakeStreams()


@pytest.fixture()
def initializer(fake_streams, fake_chain):
    return SchemaInitializer(fake_streams, fake_chain)


@pytest.fixture()
def app(fake_streams, fake_chain, initializer):
    application = create_app()
    application.dependency_overrides[get_chain_client] = lambda: fake_chain
    application.dependency_overrides[get_streams_client] = lambda: fake_streams
    application.dependency_overrides[get_schema_initializer] = lambda: initializer
    application.dependency_overrides[get_player_encoder] = lambda: SchemaEncoder(
        PLAYER_SCHEMA
    )
    application.dependency_overrides[get_publisher] = lambda: PUBLISHER
    yield application
    application.dependency_overrides.clear()


@pytest.fixture()
def client(app):
    return TestClient(app)
