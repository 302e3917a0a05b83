"""
棋局合法性验证器

检查一个棋盘能否作为起始局面使用。对局过程中不会重复验证，
斜向走子本身保证棋子始终停留在深色格上。
"""

from typing import Any, Dict, List, Tuple

import numpy as np

from .draughts_board import DraughtsBoard
from .piece import BOARD_SIZE, VALID_CELL_CODES, Player, is_dark_square


class BoardValidator:
    """
    棋局合法性验证器

    提供棋盘结构、棋子位置和棋子数量的验证。
    """

    # 每方最多棋子数
    MAX_PIECES_PER_SIDE = 12

    def validate_board_structure(self, board: DraughtsBoard) -> Tuple[bool, List[str]]:
        """
        验证棋盘基本结构

        Args:
            board: 要验证的棋盘

        Returns:
            Tuple[bool, List[str]]: (是否合法, 错误信息列表)
        """
        errors = []

        if board.board.shape != (BOARD_SIZE, BOARD_SIZE):
            errors.append(f"棋盘尺寸错误: {board.board.shape}, 应为({BOARD_SIZE}, {BOARD_SIZE})")
            return False, errors

        invalid_codes = set(np.unique(board.board).tolist()) - set(VALID_CELL_CODES)
        if invalid_codes:
            errors.append(f"存在无效的格子编码: {sorted(invalid_codes)}")

        if not isinstance(board.current_player, Player):
            errors.append(f"当前玩家值错误: {board.current_player}")

        return len(errors) == 0, errors

    def validate_piece_positions(self, board: DraughtsBoard) -> Tuple[bool, List[str]]:
        """
        验证棋子位置: 只能位于深色格，兵不能停在自己的升变行

        Args:
            board: 要验证的棋盘

        Returns:
            Tuple[bool, List[str]]: (是否合法, 错误信息列表)
        """
        errors = []

        for pos, piece in board.iter_pieces():
            if not is_dark_square(pos):
                errors.append(f"棋子位于浅色格: {pos}")
            if not piece.is_king and pos[0] == piece.owner.promotion_row:
                errors.append(f"{piece.owner.display_name}的兵位于升变行却未升变: {pos}")

        return len(errors) == 0, errors

    def validate_piece_counts(self, board: DraughtsBoard) -> Tuple[bool, List[str]]:
        """
        验证棋子数量

        Args:
            board: 要验证的棋盘

        Returns:
            Tuple[bool, List[str]]: (是否合法, 错误信息列表)
        """
        errors = []

        for player in Player:
            count = board.count_pieces(player)
            if count > self.MAX_PIECES_PER_SIDE:
                errors.append(f"{player.display_name}棋子数量超限: {count} > {self.MAX_PIECES_PER_SIDE}")

        return len(errors) == 0, errors

    def full_validation(self, board: DraughtsBoard) -> Tuple[bool, List[str]]:
        """
        完整的棋局验证

        Returns:
            Tuple[bool, List[str]]: (是否合法, 所有错误信息列表)
        """
        is_valid, all_errors = self.validate_board_structure(board)
        # 结构错误时无法解码棋子
        if not is_valid:
            return False, all_errors

        for validation_func in (self.validate_piece_positions, self.validate_piece_counts):
            _, errors = validation_func(board)
            all_errors.extend(errors)

        return len(all_errors) == 0, all_errors

    def get_validation_report(self, board: DraughtsBoard) -> Dict[str, Any]:
        """
        获取详细的验证报告

        Args:
            board: 要验证的棋盘

        Returns:
            Dict[str, Any]: 验证报告
        """
        report = {
            'overall_valid': True,
            'total_errors': 0,
            'validations': {}
        }

        validation_tests = {
            'structure': self.validate_board_structure,
            'piece_positions': self.validate_piece_positions,
            'piece_counts': self.validate_piece_counts
        }

        for test_name, test_func in validation_tests.items():
            is_valid, errors = test_func(board)
            report['validations'][test_name] = {
                'valid': is_valid,
                'errors': errors,
                'error_count': len(errors)
            }

            if not is_valid:
                report['overall_valid'] = False
                report['total_errors'] += len(errors)
                if test_name == 'structure':
                    break

        return report
