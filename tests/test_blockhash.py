import json

import httpx
import pytest

from solkit.rpc.base import Commitment, CommitmentConfig, Context, ErrorResponse
from solkit.rpc.blockhash import (
    BlockhashMethods,
    BlockhashValidResult,
    FeeCalculator,
    LatestBlockhash,
    LatestBlockhashResult,
    RecentBlockhash,
    RecentBlockhashResult,
)


def make_client(response_body, seen):
    def handler(request):
        seen.append(json.loads(request.content))
        return httpx.Response(200, text=response_body)

    return BlockhashMethods(
        "http://localhost:8899", httpx.Client(transport=httpx.MockTransport(handler))
    )


def latest(slot, blockhash, height):
    return LatestBlockhashResult(
        context=Context(slot=slot),
        value=LatestBlockhash(blockhash=blockhash, last_valid_block_height=height),
    )


@pytest.mark.parametrize(
    "request_body, response_body, config, expected",
    [
        (
            '{"jsonrpc":"2.0", "id":1, "method":"getLatestBlockhash"}',
            '{"jsonrpc":"2.0","result":{"context":{"slot":112872139},"value":{"blockhash":"9K9GnvWXn9zYitQdHUSYzvjLjebnviwEFaWgWqHDU3ve","lastValidBlockHeight":92248597}},"id":1}',
            None,
            latest(112872139, "9K9GnvWXn9zYitQdHUSYzvjLjebnviwEFaWgWqHDU3ve", 92248597),
        ),
        (
            '{"jsonrpc":"2.0", "id":1, "method":"getLatestBlockhash", "params":[{"commitment": "processed"}]}',
            '{"jsonrpc":"2.0","result":{"context":{"slot":112871314},"value":{"blockhash":"3H2pwJD6pTrEveh5xcwHXToLn7txt5uTW6CPzCan4ZKL","lastValidBlockHeight":92247902}},"id":1}',
            CommitmentConfig(commitment=Commitment.PROCESSED),
            latest(112871314, "3H2pwJD6pTrEveh5xcwHXToLn7txt5uTW6CPzCan4ZKL", 92247902),
        ),
        (
            '{"jsonrpc":"2.0", "id":1, "method":"getLatestBlockhash", "params":[{"commitment": "confirmed"}]}',
            '{"jsonrpc":"2.0","result":{"context":{"slot":112871311},"value":{"blockhash":"FXuaK93DmxWt98bv3wYMdE3TMnY2o8e3h85KrGWEUAzv","lastValidBlockHeight":92247899}},"id":1}',
            CommitmentConfig(commitment=Commitment.CONFIRMED),
            latest(112871311, "FXuaK93DmxWt98bv3wYMdE3TMnY2o8e3h85KrGWEUAzv", 92247899),
        ),
        (
            '{"jsonrpc":"2.0", "id":1, "method":"getLatestBlockhash", "params":[{"commitment": "finalized"}]}',
            '{"jsonrpc":"2.0","result":{"context":{"slot":112871221},"value":{"blockhash":"21f41sJRvMV8Tc3R5bTTA3n3yBLuoocSkgb8zj1vmEJa","lastValidBlockHeight":92247838}},"id":1}',
            CommitmentConfig(commitment=Commitment.FINALIZED),
            latest(112871221, "21f41sJRvMV8Tc3R5bTTA3n3yBLuoocSkgb8zj1vmEJa", 92247838),
        ),
    ],
)
def test_get_latest_blockhash(request_body, response_body, config, expected):
    seen = []
    response = make_client(response_body, seen).get_latest_blockhash(config)
    assert seen == [json.loads(request_body)]
    assert (response.jsonrpc, response.id, response.error) == ("2.0", 1, None)
    assert response.result == expected


@pytest.mark.parametrize(
    "request_body, response_body, config, expected",
    [
        (
            '{"jsonrpc":"2.0", "id":1, "method":"getRecentBlockhash"}',
            '{"jsonrpc":"2.0","result":{"context":{"slot":77387537},"value":{"blockhash":"867JxboSVrJLWQNZfF2odbP1QVVsd3DHYxbhsRX85Tsj","feeCalculator":{"lamportsPerSignature":5000}}},"id":1}',
            None,
            RecentBlockhashResult(
                context=Context(slot=77387537),
                value=RecentBlockhash(
                    blockhash="867JxboSVrJLWQNZfF2odbP1QVVsd3DHYxbhsRX85Tsj",
                    fee_calculator=FeeCalculator(lamports_per_signature=5000),
                ),
            ),
        ),
        (
            '{"jsonrpc":"2.0", "id":1, "method":"getRecentBlockhash", "params":[{"commitment": "finalized"}]}',
            '{"jsonrpc":"2.0","result":{"context":{"slot":77387538},"value":{"blockhash":"5nNRmBkGM7CwtD9LUtd3pjHe33viBVjdGA1coq2Lz22E","feeCalculator":{"lamportsPerSignature":5000}}},"id":1}',
            CommitmentConfig(commitment=Commitment.FINALIZED),
            RecentBlockhashResult(
                context=Context(slot=77387538),
                value=RecentBlockhash(
                    blockhash="5nNRmBkGM7CwtD9LUtd3pjHe33viBVjdGA1coq2Lz22E",
                    fee_calculator=FeeCalculator(lamports_per_signature=5000),
                ),
            ),
        ),
    ],
)
def test_get_recent_blockhash(request_body, response_body, config, expected):
    seen = []
    response = make_client(response_body, seen).get_recent_blockhash(config)
    assert seen == [json.loads(request_body)]
    assert (response.jsonrpc, response.id, response.error) == ("2.0", 1, None)
    assert response.result == expected


@pytest.mark.parametrize(
    "request_body, response_body, config, expected",
    [
        (
            '{"jsonrpc":"2.0", "id":1, "method":"isBlockhashValid", "params":["14PVzxGGU4WQ7qbQffn3XJV1pasafs4wApFUs5sps89N"]}',
            '{"jsonrpc":"2.0","result":{"context":{"slot":112890169},"value":false},"id":1}',
            None,
            BlockhashValidResult(context=Context(slot=112890169), value=False),
        ),
        (
            '{"jsonrpc":"2.0", "id":1, "method":"isBlockhashValid", "params":["14PVzxGGU4WQ7qbQffn3XJV1pasafs4wApFUs5sps89N", {"commitment": "processed"}]}',
            '{"jsonrpc":"2.0","result":{"context":{"slot":112890231},"value":true},"id":1}',
            CommitmentConfig(commitment=Commitment.PROCESSED),
            BlockhashValidResult(context=Context(slot=112890231), value=True),
        ),
    ],
)
def test_is_blockhash_valid(request_body, response_body, config, expected):
    seen = []
    response = make_client(response_body, seen).is_blockhash_valid(
        "14PVzxGGU4WQ7qbQffn3XJV1pasafs4wApFUs5sps89N", config
    )
    assert seen == [json.loads(request_body)]
    assert (response.jsonrpc, response.id, response.error) == ("2.0", 1, None)
    assert response.result == expected


def test_node_error_is_reported():
    seen = []
    body = '{"jsonrpc":"2.0","error":{"code":-32601,"message":"Method not found"},"id":1}'
    response = make_client(body, seen).get_latest_blockhash()
    assert response.error == ErrorResponse(code=-32601, message="Method not found")
    assert response.result is None