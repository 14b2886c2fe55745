import unittest
from unittest.mock import patch

import main


class TestReadLine(unittest.IsolatedAsyncioTestCase):

    async def test_returns_typed_line(self):
        with patch("builtins.input", return_value="/list"):
            self.assertEqual(await main.read_line("You: "), "/list")

    async def test_interrupt_is_raised_in_the_loop(self):
        with patch("builtins.input", side_effect=KeyboardInterrupt):
            with self.assertRaises(KeyboardInterrupt):
                await main.read_line("You: ")

    async def test_end_of_input_is_raised_in_the_loop(self):
        with patch("builtins.input", side_effect=EOFError):
            with self.assertRaises(EOFError):
                await main.read_line("You: ")

    async def test_repl_exits_on_eof_and_clears_assistant(self):
        with patch("builtins.input", side_effect=EOFError), \
                patch("main.JournalApp.clear_assistant") as clear:
            await main.repl()
        clear.assert_called_once()


if __name__ == "__main__":
    unittest.main()
