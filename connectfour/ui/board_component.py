"""SVG board renderer + JavaScript click handler for Gradio."""

from __future__ import annotations

from connectfour.game.board import HEIGHT, WIDTH, Board, format_column
from connectfour.game.types import Token

# Layout constants
CELL_SIZE = 70
MARGIN = 20
LABEL_HEIGHT = 30
BOARD_WIDTH_PX = MARGIN * 2 + CELL_SIZE * WIDTH
BOARD_HEIGHT_PX = MARGIN * 2 + CELL_SIZE * HEIGHT + LABEL_HEIGHT
DISC_RADIUS = 28

# Colors
FRAME_COLOR = "#1F4FB4"
HOLE_COLOR = "#F2F2F2"
PLAYER1_COLOR = "#E53935"
PLAYER2_COLOR = "#FDD835"
LAST_MOVE_COLOR = "#FFFFFF"
LABEL_COLOR = "#333333"
BANNER_WIN_COLOR = "#4ADE80"
BANNER_LOSS_COLOR = "#F87171"
BANNER_DRAW_COLOR = "#FFFFFF"

DISC_COLORS = {Token.PLAYER1: PLAYER1_COLOR, Token.PLAYER2: PLAYER2_COLOR}


def _coord(row: int, column: int) -> tuple[int, int]:
    """Centre of a cell in SVG pixels; row 0 is the bottom row."""
    x = MARGIN + column * CELL_SIZE + CELL_SIZE // 2
    y = MARGIN + (HEIGHT - 1 - row) * CELL_SIZE + CELL_SIZE // 2
    return x, y


def _banner_color(message: str) -> str:
    if message.startswith("You win"):
        return BANNER_WIN_COLOR
    if message.startswith("Draw"):
        return BANNER_DRAW_COLOR
    return BANNER_LOSS_COLOR


def render_board_svg(
    board: Board,
    clickable: bool = True,
    highlight_last: bool = True,
    game_over_message: str = "",
) -> str:
    """Render the board as an SVG string."""
    parts: list[str] = []

    parts.append(
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{BOARD_WIDTH_PX}" height="{BOARD_HEIGHT_PX}" '
        f'viewBox="0 0 {BOARD_WIDTH_PX} {BOARD_HEIGHT_PX}" '
        f'id="connectfour-board">'
    )

    # Frame
    frame_h = CELL_SIZE * HEIGHT
    parts.append(
        f'<rect x="{MARGIN}" y="{MARGIN}" width="{CELL_SIZE * WIDTH}" '
        f'height="{frame_h}" fill="{FRAME_COLOR}" rx="8"/>'
    )

    # Holes and discs
    last_column = board.last_move if highlight_last else None
    last_row = board.column_height(last_column) - 1 if last_column is not None else None

    for column in range(WIDTH):
        for row in range(HEIGHT):
            x, y = _coord(row, column)
            token = board.token_at(row, column)
            fill = DISC_COLORS[token] if token is not None else HOLE_COLOR
            parts.append(f'<circle cx="{x}" cy="{y}" r="{DISC_RADIUS}" fill="{fill}"/>')
            if token is not None and column == last_column and row == last_row:
                parts.append(
                    f'<circle cx="{x}" cy="{y}" r="8" '
                    f'fill="{LAST_MOVE_COLOR}" opacity="0.7"/>'
                )

    # Column labels
    label_y = MARGIN + frame_h + LABEL_HEIGHT - 8
    for column in range(WIDTH):
        x, _ = _coord(0, column)
        parts.append(
            f'<text x="{x}" y="{label_y}" text-anchor="middle" '
            f'font-size="16" font-family="monospace" fill="{LABEL_COLOR}">'
            f'{format_column(column)}</text>'
        )

    # Clickable column targets (transparent rectangles over each open column)
    if clickable and not board.is_over:
        for column in board.legal_moves():
            x = MARGIN + column * CELL_SIZE
            label = format_column(column)
            parts.append(
                f'<rect x="{x}" y="{MARGIN}" width="{CELL_SIZE}" height="{frame_h}" '
                f'fill="transparent" class="board-click" '
                f'data-col="{label}" style="cursor:pointer">'
                f'<title>Column {label}</title></rect>'
            )

    if game_over_message:
        color = _banner_color(game_over_message)
        cy = MARGIN + frame_h // 2
        parts.append(
            f'<rect x="{MARGIN}" y="{cy - 30}" width="{CELL_SIZE * WIDTH}" height="60" '
            f'fill="rgba(0, 0, 0, 0.6)"/>'
        )
        parts.append(
            f'<text x="{BOARD_WIDTH_PX // 2}" y="{cy + 10}" text-anchor="middle" '
            f'font-size="32" font-weight="bold" font-family="sans-serif" '
            f'fill="{color}">{game_over_message}</text>'
        )

    parts.append("</svg>")
    return "\n".join(parts)


# JavaScript that handles clicks on the SVG and writes the column to a hidden
# Gradio Textbox, then presses the submit button.
BOARD_CLICK_JS = """
() => {
    if (window._connectFourClickBound) return;
    window._connectFourClickBound = true;

    document.addEventListener('click', function(e) {
        const target = e.target.closest('.board-click');
        if (!target) return;
        const col = target.getAttribute('data-col');
        if (!col) return;

        const input = document.querySelector('#column-input textarea, #column-input input');
        if (!input) return;
        const nativeSetter = Object.getOwnPropertyDescriptor(
            window.HTMLInputElement.prototype, 'value'
        )?.set || Object.getOwnPropertyDescriptor(
            window.HTMLTextAreaElement.prototype, 'value'
        )?.set;
        if (nativeSetter) {
            nativeSetter.call(input, col);
        } else {
            input.value = col;
        }
        input.dispatchEvent(new Event('input', { bubbles: true }));
        const btn = document.querySelector('#column-submit');
        if (btn) btn.click();
    });
}
"""
