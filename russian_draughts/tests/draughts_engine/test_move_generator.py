"""
测试MoveGenerator类的功能

测试单个棋子的目标格生成、全部走法的顺序以及有吃必吃规则。
"""

from russian_draughts.src.draughts_engine.config import RulesConfig
from russian_draughts.src.draughts_engine.rules_engine import (
    DraughtsBoard, Move, MoveGenerator, Piece, Player
)

W = Piece(Player.WHITE)
WK = Piece(Player.WHITE, is_king=True)
B = Piece(Player.BLACK)


class TestMoveGenerator:
    """MoveGenerator类的测试"""

    def setup_method(self):
        """每个测试方法前的设置"""
        self.generator = MoveGenerator()
        self.board = DraughtsBoard()

    def test_initial_white_moves(self):
        """测试初始局面白方的走法及顺序"""
        moves = self.generator.get_all_moves(self.board, Player.WHITE)
        notations = [move.to_coordinate_notation() for move in moves]

        assert notations == ['a3b4', 'c3b4', 'c3d4', 'e3d4', 'e3f4', 'g3f4', 'g3h4']

    def test_initial_black_moves(self):
        """测试初始局面黑方的走法"""
        moves = self.generator.get_all_moves(self.board, Player.BLACK)
        assert len(moves) == 7
        assert all(move.from_pos[0] == 2 for move in moves)
        assert all(move.to_pos[0] == 3 for move in moves)

    def test_empty_source(self):
        assert self.generator.get_moves_for_piece(self.board, (4, 3)) == []

    def test_man_moves_in_all_directions(self, make_board):
        """兵在没有吃子时可以向四个斜向单步移动"""
        board = make_board({(4, 3): W, (0, 7): B})
        moves = self.generator.get_moves_for_piece(board, (4, 3))
        assert moves == [(3, 2), (3, 4), (5, 2), (5, 4)]

    def test_man_moves_at_edge(self, make_board):
        board = make_board({(5, 0): W, (0, 7): B})
        assert self.generator.get_moves_for_piece(board, (5, 0)) == [(4, 1), (6, 1)]

    def test_capture_suppresses_steps(self, make_board):
        """存在吃子时只提供跳吃"""
        board = make_board({(2, 1): W, (3, 2): B, (6, 5): W})

        assert self.generator.get_moves_for_piece(board, (2, 1)) == [(4, 3)]
        # 其他棋子即使没有吃子机会也不能单步移动
        assert self.generator.get_moves_for_piece(board, (6, 5)) == []
        assert self.generator.get_all_moves(board, Player.WHITE) == [Move((2, 1), (4, 3))]
        assert self.generator.get_capture_moves(board, Player.WHITE) == [Move((2, 1), (4, 3))]
        assert self.generator.get_capture_moves(DraughtsBoard(), Player.WHITE) == []

    def test_capture_after_opening(self):
        """c3-d4 f6-e5 之后白方只能吃子"""
        board = DraughtsBoard()
        board.set_piece_at((4, 3), board.get_piece_at((5, 2)))
        board.set_piece_at((5, 2), None)
        board.set_piece_at((3, 4), board.get_piece_at((2, 5)))
        board.set_piece_at((2, 5), None)

        moves = self.generator.get_all_moves(board, Player.WHITE)
        assert moves == [Move((4, 3), (2, 5))]
        assert all(self.generator.is_capture(board, move) for move in moves)

    def test_multiple_jumps_for_one_man(self, make_board):
        board = make_board({(4, 3): W, (3, 2): B, (3, 4): B, (5, 4): B})
        moves = self.generator.get_moves_for_piece(board, (4, 3))
        assert moves == [(2, 1), (2, 5), (6, 5)]

    def test_king_capture_landings_along_ray(self, make_board):
        """飞王吃子后同一斜线上的所有空格都是落点"""
        board = make_board({(0, 0): WK, (3, 3): B})
        moves = self.generator.get_moves_for_piece(board, (0, 0))
        assert moves == [(4, 4), (5, 5), (6, 6), (7, 7)]

    def test_king_free_moves(self, make_board):
        board = make_board({(4, 3): WK, (0, 7): B})
        moves = self.generator.get_moves_for_piece(board, (4, 3))

        assert moves == [
            (3, 2), (2, 1), (1, 0),
            (3, 4), (2, 5), (1, 6),
            (5, 2), (6, 1), (7, 0),
            (5, 4), (6, 5), (7, 6),
        ]

    def test_king_ray_terminated_by_second_piece(self, make_board):
        board = make_board({(7, 0): WK, (5, 2): B, (2, 5): B})
        moves = self.generator.get_moves_for_piece(board, (7, 0))
        assert moves == [(4, 3), (3, 4)]

    def test_king_adjacent_pair_is_not_capturable(self, make_board):
        board = make_board({(7, 0): WK, (5, 2): B, (4, 3): B})
        moves = self.generator.get_moves_for_piece(board, (7, 0))
        assert moves == [(6, 1)]

    def test_king_blocked_by_own_piece(self, make_board):
        board = make_board({(7, 0): WK, (4, 3): W, (0, 7): B})
        moves = self.generator.get_moves_for_piece(board, (7, 0))
        assert moves == [(6, 1), (5, 2)]

    def test_chain_piece_restricts_other_pieces(self, make_board):
        board = make_board({(0, 3): W, (1, 2): B, (5, 0): W, (4, 1): B})
        board.chain_piece = (0, 3)

        assert self.generator.get_moves_for_piece(board, (5, 0)) == []
        assert self.generator.get_all_moves(board, Player.WHITE) == [Move((0, 3), (2, 1))]

        relaxed = MoveGenerator(rules_config=RulesConfig(enforce_chain_piece=False))
        assert relaxed.get_moves_for_piece(board, (5, 0)) == [(3, 2)]

    def test_is_capture(self, make_board):
        board = make_board({(7, 0): WK, (4, 3): B})
        assert MoveGenerator.is_capture(board, Move((7, 0), (3, 4)))
        assert not MoveGenerator.is_capture(board, Move((7, 0), (5, 2)))
        assert not MoveGenerator.is_capture(board, Move((6, 1), (5, 2)))
