"""Tests for the command line entry point."""

import re

from demo import main

ANSI = re.compile(r"\x1b\[[0-9;]*m")


class TestMain:
    """Tests for demo.main()."""

    def test_grid_command(self, capsys) -> None:
        """A given layout is rendered with its verdict."""
        assert main(["grid", "STR SV ET|LMF BOS AC|FS SSH _"]) == 0
        out = ANSI.sub("", capsys.readouterr().out)
        assert "STR" in out
        assert "impossible (no entrance at fixed entry point): STR SV ET|LMF BOS AC|FS SSH _" in out

    def test_grid_command_invalid_layout(self, capsys) -> None:
        """Parse errors are reported, not raised."""
        assert main(["grid", "STR SV|LMF"]) == 2
        assert "Invalid layout" in capsys.readouterr().out

    def test_grid_command_missing_layout(self, capsys) -> None:
        """Missing arguments print usage."""
        assert main(["grid"]) == 2
        assert "Usage" in capsys.readouterr().out

    def test_unknown_command(self, capsys) -> None:
        """Unknown commands print usage."""
        assert main(["frobnicate"]) == 2
        assert "Usage" in capsys.readouterr().out
