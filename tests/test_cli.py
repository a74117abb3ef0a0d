from blockfall.__main__ import main, parse_args


def test_ascii_mode_prints_one_frame(capsys):
    main(["--mode", "ascii", "--seed", "3"])
    out = capsys.readouterr().out.strip().splitlines()
    assert len(out) == 15
    assert all(len(line) == 10 for line in out)
    assert "".join(out).count("@") == 4


def test_custom_dimensions(capsys):
    main(["--width", "8", "--height", "6"])
    out = capsys.readouterr().out.strip().splitlines()
    assert len(out) == 6
    assert len(out[0]) == 8


def test_auto_mode_runs(capsys):
    main(["--mode", "auto", "--steps", "50", "--seed", "1", "--log-level", "WARNING"])


def test_parse_defaults():
    args = parse_args([])
    assert args.mode == "ascii"
    assert (args.width, args.height) == (10, 15)
    assert not args.all_kinds
