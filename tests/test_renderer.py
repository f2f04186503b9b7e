from connectfour.game.board import Board
from connectfour.ui.board_component import (
    BANNER_DRAW_COLOR,
    BANNER_LOSS_COLOR,
    BANNER_WIN_COLOR,
    PLAYER1_COLOR,
    PLAYER2_COLOR,
    render_board_svg,
)


def test_empty_board_svg():
    html = render_board_svg(Board())
    assert html.startswith("<svg")
    assert html.endswith("</svg>")
    assert "connectfour-board" in html
    # One click target per column
    assert html.count('class="board-click"') == 7


def test_full_column_has_no_click_target():
    html = render_board_svg(Board.from_moves([0] * 6))
    assert html.count('class="board-click"') == 6
    assert 'data-col="1"' not in html


def test_discs_drawn():
    html = render_board_svg(Board.from_moves([3, 3, 3]))
    assert html.count(f'fill="{PLAYER1_COLOR}"') == 2
    assert html.count(f'fill="{PLAYER2_COLOR}"') == 1


def test_last_move_marker():
    board = Board.from_moves([3])
    assert 'r="8"' in render_board_svg(board)
    assert 'r="8"' not in render_board_svg(board, highlight_last=False)
    assert 'r="8"' not in render_board_svg(Board())


def test_not_clickable_when_game_over():
    html = render_board_svg(Board.from_moves([0, 1, 0, 1, 0, 1, 0]))
    assert html.count('class="board-click"') == 0


def test_not_clickable_when_disabled():
    html = render_board_svg(Board(), clickable=False)
    assert html.count('class="board-click"') == 0


def test_game_over_banner_win():
    html = render_board_svg(Board(), game_over_message="You win!")
    assert "You win!" in html
    assert BANNER_WIN_COLOR in html


def test_game_over_banner_loss():
    html = render_board_svg(Board(), game_over_message="AI wins!")
    assert BANNER_LOSS_COLOR in html


def test_game_over_banner_draw():
    html = render_board_svg(Board(), game_over_message="Draw!")
    assert "Draw!" in html
    assert BANNER_DRAW_COLOR in html
