"""Connect Four: Gradio web app entry point."""

import gradio as gr

from connectfour.ui.board_component import BOARD_CLICK_JS
from connectfour.ui.play_tab import build_play_tab

with gr.Blocks(title="Connect Four") as demo:
    gr.Markdown("# Connect Four")
    gr.Markdown("7 columns x 6 rows. Drop discs, connect four to win.")

    with gr.Tab("Play"):
        build_play_tab()

    # Bind board click handler JS on page load
    demo.load(fn=None, js=BOARD_CLICK_JS)

if __name__ == "__main__":
    demo.launch(theme=gr.themes.Soft())
