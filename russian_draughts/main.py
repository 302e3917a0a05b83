#!/usr/bin/env python3
"""
Russian Draughts 主入口文件

提供命令行接口: 查看信息、显示棋盘、在终端中对局。
"""

import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

# 添加项目根目录到Python路径
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from russian_draughts import __version__, __description__
from russian_draughts.src.draughts_engine.config import (
    ConfigManager, DisplayConfig, LoggingConfig, RulesConfig
)
from russian_draughts.src.draughts_engine.game_interface import GameSession
from russian_draughts.src.draughts_engine.rules_engine import Move, RuleEngine
from russian_draughts.src.draughts_engine.utils import setup_logger_from_config

console = Console()


def print_banner():
    """打印项目横幅"""
    banner_text = Text()
    banner_text.append("Russian Draughts\n", style="bold blue")
    banner_text.append(f"版本: {__version__}\n", style="green")
    banner_text.append(__description__, style="white")

    panel = Panel(
        banner_text,
        title="俄罗斯跳棋",
        title_align="center",
        border_style="blue",
        padding=(1, 2)
    )
    console.print(panel)


def render_moves(moves) -> Table:
    """把走法列表渲染为表格"""
    table = Table(title="可走走法", show_lines=False)
    table.add_column("#", justify="right", style="cyan")
    table.add_column("走法", style="green")
    for index, move in enumerate(moves, start=1):
        table.add_row(str(index), move.to_coordinate_notation())
    return table


@click.group()
@click.version_option(version=__version__, prog_name="Russian Draughts")
@click.option('--debug', is_flag=True, help='启用调试模式')
@click.option('--config', type=click.Path(exists=True, file_okay=False), help='配置目录路径')
@click.pass_context
def cli(ctx: click.Context, debug: bool, config: Optional[str]):
    """俄罗斯跳棋 - 有吃必吃、连续吃子与飞王"""
    if config:
        manager = ConfigManager(config)
        rules_config = manager.get_rules_config()
        logging_config = manager.get_logging_config()
        display_config = manager.get_display_config()
        console.print(f"[green]使用配置目录: {config}[/green]")
    else:
        rules_config, logging_config, display_config = RulesConfig(), LoggingConfig(), DisplayConfig()

    if debug:
        console.print("[yellow]调试模式已启用[/yellow]")

    # 控制台日志由 console_output 决定，--debug 时总是输出
    setup_logger_from_config(logging_config, debug=debug)

    ctx.obj = {
        'rules': rules_config,
        'display': display_config
    }


@cli.command()
def info():
    """显示系统信息"""
    print_banner()


@cli.command()
@click.pass_context
def show(ctx: click.Context):
    """显示初始局面和白方的可走走法"""
    engine = RuleEngine(rules_config=ctx.obj['rules'])
    display: DisplayConfig = ctx.obj['display']

    console.print(engine.board.to_visual_string(show_coordinates=display.show_coordinates))
    if display.highlight_moves:
        console.print(render_moves(engine.get_all_moves()))


@cli.command()
@click.pass_context
def play(ctx: click.Context):
    """在终端中双人对局，输入如 c3d4 的走法，输入 quit 退出"""
    session = GameSession(rules_config=ctx.obj['rules'])
    display: DisplayConfig = ctx.obj['display']

    while not session.is_finished:
        console.print(session.board.to_visual_string(show_coordinates=display.show_coordinates))
        if session.engine.chain_piece is not None:
            square = Move.square_name(session.engine.chain_piece)
            console.print(f"[yellow]继续用 {square} 的棋子吃子[/yellow]")
        elif session.engine.can_capture():
            console.print("[yellow]必须吃子[/yellow]")

        moves = session.legal_moves()
        if display.highlight_moves:
            console.print(render_moves(moves))
        if not moves:
            console.print(f"[red]{session.current_player.display_name}无子可走[/red]")
            break

        text = click.prompt(f"{session.current_player.display_name}走法", type=str)
        if text.strip().lower() in ('quit', 'exit', 'q'):
            console.print("[yellow]对局已退出[/yellow]")
            return

        try:
            move = Move.from_coordinate_notation(text)
        except ValueError as e:
            console.print(f"[red]{e}[/red]")
            continue

        result = session.play(move.from_pos, move.to_pos)
        if not result:
            reason = result.error.value if result is not None else "目标格不可达"
            console.print(f"[red]非法走法: {text} ({reason})[/red]")

    if session.winner is not None:
        console.print(session.board.to_visual_string(show_coordinates=display.show_coordinates))
        console.print(Panel(f"{session.winner.display_name}获胜!", border_style="green"))


def main():
    """主入口函数"""
    try:
        cli()
    except KeyboardInterrupt:
        console.print("\n[yellow]程序被用户中断[/yellow]")
        sys.exit(0)


if __name__ == "__main__":
    main()
