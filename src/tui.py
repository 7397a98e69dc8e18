"""
Curses front end

Draws the five regions (URL bar, method, request body, results, history)
and translates keystrokes into ClientSession events. Everything stateful
lives in the session; this module only renders it.
"""

import curses
import textwrap
from curses.textpad import rectangle

from .logging_config import get_module_logger
from .session import ClientSession

logger = get_module_logger("tui")

KEY_TAB = 9
KEY_ENTER = (10, 13, curses.KEY_ENTER)
KEY_BACKSPACES = (8, 127, curses.KEY_BACKSPACE)
KEY_CTRL_C = 3
KEY_CTRL_Q = 17
KEY_CTRL_S = 19
KEY_CTRL_U = 21

MIN_HEIGHT = 16
MIN_WIDTH = 50
METHOD_WIDTH = 12
HISTORY_HEIGHT = 7

HELP_TEXT = "Tab: focus | Space: method | Ctrl-S: send | Ctrl-U: clear | Ctrl-Q: quit"


class TerminalUI:
    """Renders a ClientSession in the terminal and feeds it keystrokes"""

    def __init__(self, session: ClientSession, stdscr=None):
        self.session = session
        self.stdscr = stdscr

    def run(self, stdscr) -> None:
        """Main loop; returns when the session stops running"""
        self.stdscr = stdscr
        # Raw mode so Ctrl-S and Ctrl-C reach the key handler
        curses.raw()
        if curses.has_colors():
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(1, curses.COLOR_RED, -1)
            curses.init_pair(2, curses.COLOR_YELLOW, -1)

        while self.session.running:
            self.draw()
            try:
                key = stdscr.get_wch()
            except curses.error:
                # No input (e.g. interrupted by a resize)
                continue
            self.handle_key(key)

        logger.info("Interface closed")

    def handle_key(self, key) -> None:
        """Map one keystroke (str from get_wch or int key code) to a session event"""
        session = self.session
        code = ord(key) if isinstance(key, str) and len(key) == 1 else key

        if code in (KEY_CTRL_C, KEY_CTRL_Q):
            session.request_quit()
        elif code == KEY_TAB:
            session.advance_focus()
        elif code == KEY_CTRL_S:
            self._show_status(f"Sending {session.method} ...")
            session.submit()
        elif code == KEY_CTRL_U:
            session.clear_current_region()
        elif code == ord(" ") and session.active_region.name == "method":
            session.advance_method()
        elif code in KEY_BACKSPACES:
            session.delete_char()
        elif code in KEY_ENTER:
            if session.active_region.name == "body":
                session.insert_text("\n")
        elif isinstance(key, str) and key.isprintable():
            session.insert_text(key)

    # Rendering

    def draw(self) -> None:
        stdscr = self.stdscr
        stdscr.erase()
        height, width = stdscr.getmaxyx()
        if height < MIN_HEIGHT or width < MIN_WIDTH:
            self._put(0, 0, f"Terminal too small! Please resize to at least {MIN_WIDTH}x{MIN_HEIGHT}")
            stdscr.refresh()
            return

        session = self.session
        active = session.active_region.name
        split = width // 3
        panel_height = height - 3 - HISTORY_HEIGHT - 1

        layout = {
            "url": (0, 0, 3, width - METHOD_WIDTH),
            "method": (0, width - METHOD_WIDTH, 3, METHOD_WIDTH),
            "body": (3, 0, panel_height, split),
            "output": (3, split, panel_height, width - split),
            "history": (height - HISTORY_HEIGHT - 1, 0, HISTORY_HEIGHT, width),
        }
        contents = {
            "url": [session.fields["url"]],
            "method": [session.method],
            "body": session.fields["body"].split("\n"),
            "output": session.output_text.split("\n"),
            "history": session.history_lines(),
        }

        cursor_at = None
        for region in session.focus_controller.regions:
            y, x, h, w = layout[region.name]
            self._box(y, x, h, w, region.title, region.name == active)
            end = self._fill(y, x, h, w, contents[region.name], wrap=region.name != "url")
            if region.name == active and session.cursor_visible:
                cursor_at = end

        self._put(height - 1, 0, session.status_message or HELP_TEXT, curses.A_DIM)

        try:
            curses.curs_set(1 if cursor_at else 0)
        except curses.error:
            # Terminal cannot change cursor visibility
            pass
        if cursor_at:
            stdscr.move(*cursor_at)
        stdscr.refresh()

    def _box(self, y: int, x: int, h: int, w: int, title: str, active: bool) -> None:
        try:
            rectangle(self.stdscr, y, x, y + h - 1, x + w - 1)
        except curses.error:
            pass
        attr = curses.color_pair(1) | curses.A_BOLD if active else curses.A_NORMAL
        self._put(y, x + 2, f" {title} ", attr)

    def _fill(self, y: int, x: int, h: int, w: int, lines: list[str], wrap: bool = True):
        """Write lines inside a box, keeping the tail visible. Returns the cursor position."""
        inner_w = max(w - 2, 1)
        inner_h = max(h - 2, 1)

        rows: list[str] = []
        for line in lines:
            if wrap:
                rows.extend(textwrap.wrap(line, inner_w, replace_whitespace=False) or [""])
            else:
                rows.append(line[-(inner_w - 1):] if len(line) >= inner_w else line)

        visible = rows[-inner_h:] or [""]
        for i, row in enumerate(visible):
            self._put(y + 1 + i, x + 1, row[:inner_w])

        last = visible[-1]
        return y + len(visible), min(x + 1 + len(last), x + inner_w)

    def _show_status(self, message: str) -> None:
        if self.stdscr is None:
            return
        height, _ = self.stdscr.getmaxyx()
        self._put(height - 1, 0, message, curses.A_BOLD)
        self.stdscr.clrtoeol()
        self.stdscr.refresh()

    def _put(self, y: int, x: int, text: str, attr: int = 0) -> None:
        _, width = self.stdscr.getmaxyx()
        try:
            self.stdscr.addnstr(y, x, text, max(width - x - 1, 0), attr)
        except curses.error:
            # Text clipped at the screen edge
            pass


def run_tui(session: ClientSession) -> None:
    """Run the interface until the user quits"""
    ui = TerminalUI(session)
    curses.wrapper(ui.run)
