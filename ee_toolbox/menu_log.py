"""
EE Toolbox - File / Log Tools Menu
"""

from __future__ import annotations

from ee_toolbox.toolbox import ToolModule


class LogMenu(ToolModule):

    title = "File/Log Tools"

    def run(self) -> None:
        con = self.console
        while True:
            con.line("\n==== File & Log Tools ====")
            con.line(f'Current log file: "{self.result_log.path}"')
            con.line("1. View file")
            con.line("2. Clear file")
            con.line("0. Back")

            choice = con.read_int("Select: ", 0, 2)
            if choice == 0:
                return
            if choice == 1:
                self.view()
            else:
                self.clear()

    def view(self) -> None:
        text = self.result_log.view()
        if text is None:
            self.console.line("No file or cannot open (maybe empty).")
            return
        self.console.line("\n--- File Start ---")
        self.console.write(text)
        self.console.line("--- File End ---")

    def clear(self) -> None:
        if self.result_log.clear():
            self.console.line("File cleared.")
        else:
            self.console.line("Failed to clear file.")
