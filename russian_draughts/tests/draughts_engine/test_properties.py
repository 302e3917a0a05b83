"""
随机对局的不变量测试

用固定种子随机走完若干盘棋，每一步检查规则引擎的不变量。
"""

import random

import pytest

from russian_draughts.src.draughts_engine.rules_engine import (
    BOARD_SIZE, BoardValidator, RuleEngine
)

MAX_PLIES = 150


def random_square(rng):
    return rng.randrange(BOARD_SIZE), rng.randrange(BOARD_SIZE)


@pytest.mark.parametrize("seed", [1, 7, 42, 2024, 31337])
def test_random_playout_consistency(seed):
    rng = random.Random(seed)
    engine = RuleEngine()
    validator = BoardValidator()

    for _ in range(MAX_PLIES):
        if engine.check_win()[0]:
            break

        moves = engine.get_all_moves()
        if not moves:
            break

        # 有吃必吃: 能吃子时生成的都是吃子走法
        if engine.can_capture():
            assert all(engine.move_generator.is_capture(engine.board, move) for move in moves)

        # 随机走法被拒绝时棋盘不变
        from_pos, to_pos = random_square(rng), random_square(rng)
        if engine.move_validator.check_move(engine.board, from_pos, to_pos) is not None:
            before = engine.board.copy()
            assert not engine.try_move(from_pos, to_pos)
            assert engine.board == before

        move = rng.choice(moves)
        player = engine.current_player
        total_before = engine.board.count_pieces()
        opponent_before = engine.board.count_pieces(player.opponent)

        result = engine.try_move(move.from_pos, move.to_pos)
        assert result, f"生成的走法被拒绝: {move} ({result.error})"

        if result.captured is not None:
            assert engine.board.count_pieces() == total_before - 1
            assert engine.board.count_pieces(player.opponent) == opponent_before - 1
        else:
            assert engine.board.count_pieces() == total_before

        if result.continues_capture:
            assert result.captured is not None
            assert engine.current_player is player
            assert engine.chain_piece == move.to_pos
        else:
            assert engine.current_player is player.opponent
            assert engine.chain_piece is None
            is_valid, errors = validator.validate_piece_positions(engine.board)
            assert is_valid, errors

        assert engine.board.count_pieces(player) <= 12
        assert engine.board.count_pieces(player.opponent) <= 12
