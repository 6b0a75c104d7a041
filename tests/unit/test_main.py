import sys

import main


def test_main_forwards_command_line(monkeypatch):
    seen = []
    monkeypatch.setattr("quotes_verifier.cli.run_cli", lambda argv: seen.append(argv))
    monkeypatch.setattr(sys, "argv", ["main.py", "--driver", "firefox"])

    main.main()

    assert seen == [["--driver", "firefox"]]
