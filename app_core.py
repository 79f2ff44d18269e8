import argparse
import logging
import customtkinter as ctk
from tkinter import colorchooser, Canvas, BOTH, YES, Menu
from PIL import ImageTk

from config import load_config
from demo_scene import compose_frame
from pixel_buffer import PixelBuffer, hex_to_rgba
from region_fill import flood_fill

_LOG = logging.getLogger(__name__)


class DrawingApp(ctk.CTk):
    """演示窗口：显示示例帧，点击画布即用当前颜色做洪水填充"""

    def __init__(self, config):
        super().__init__()

        # --- 基本窗口设置 ---
        self.config_data = config
        self.title("Raster Demo")
        self.geometry(f"{config.canvas_width}x{config.canvas_height}")
        ctk.set_appearance_mode("Dark")
        ctk.set_default_color_theme("blue")

        # --- 状态变量 ---
        self.current_fill_color = "#FFDCC8"
        self.frame_buffer = None
        self._image_refs = []
        self._image_id = None

        self.setup_menu()
        self.canvas = Canvas(self, width=config.canvas_width, height=config.canvas_height,
                             highlightthickness=0, bg="#202020")
        self.canvas.pack(fill=BOTH, expand=YES)
        self.canvas.bind("<Button-1>", self.fill_at)

        self.rebuild_scene()

    def setup_menu(self):
        menubar = Menu(self)
        filemenu = Menu(menubar, tearoff=0)
        filemenu.add_command(label="退出", command=self.quit)
        menubar.add_cascade(label="文件", menu=filemenu)

        viewmenu = Menu(menubar, tearoff=0)
        viewmenu.add_command(label="重新生成", command=self.rebuild_scene)
        viewmenu.add_command(label="填充颜色...", command=self.choose_fill_color)
        menubar.add_cascade(label="视图", menu=viewmenu)
        self.config(menu=menubar)

    def rebuild_scene(self):
        self.frame_buffer = PixelBuffer.from_image(compose_frame(self.config_data))
        self.refresh_canvas()

    def refresh_canvas(self):
        tk_img = ImageTk.PhotoImage(self.frame_buffer.image)
        if self._image_id is None:
            self._image_id = self.canvas.create_image(0, 0, image=tk_img, anchor='nw')
        else:
            self.canvas.itemconfig(self._image_id, image=tk_img)
        # 只保留当前帧的引用，避免 PhotoImage 被 GC
        self._image_refs = [tk_img]

    def choose_fill_color(self):
        color = colorchooser.askcolor(color=self.current_fill_color)[1]
        if color:
            self.current_fill_color = color

    def fill_at(self, event):
        filled = flood_fill(self.frame_buffer, event.x, event.y, hex_to_rgba(self.current_fill_color))
        _LOG.info("flood fill at (%d, %d) changed %d pixels", event.x, event.y, len(filled))
        if filled:
            self.refresh_canvas()


def build_parser():
    parser = argparse.ArgumentParser(description="Software rasterization demo viewer")
    parser.add_argument("--config", help="JSON config file")
    parser.add_argument("--log-level", dest="log_level", default=None,
                        help="DEBUG, INFO, WARNING, ...")
    parser.add_argument("--width", dest="canvas_width", type=int, default=None)
    parser.add_argument("--height", dest="canvas_height", type=int, default=None)
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    config = load_config(args.config, log_level=args.log_level,
                         canvas_width=args.canvas_width, canvas_height=args.canvas_height)
    logging.basicConfig(level=config.log_level.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app = DrawingApp(config)
    app.mainloop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
