import pytest

from threepointcircle.app import main, parse_args


def test_parse_args_defaults():
    args = parse_args([])
    assert (args.width, args.height) == (1280, 800)
    assert (args.radius, args.thickness) == (10, 5)
    assert args.click == []
    assert args.random == 0


def test_parse_args_bad_click():
    with pytest.raises(SystemExit):
        parse_args(["--click", "ten,20"])


def test_main_writes_image_and_labels(tmp_path, capsys):
    out = tmp_path / "circle.pgm"
    status = main([
        "--width", "50", "--height", "40", "--radius", "3",
        "--click", "10,10", "--click", "30,10", "--click", "20,30",
        "--output", str(out),
    ])
    assert status == 0
    data = out.read_bytes()
    header = b"P5\n50 40\n255\n"
    assert data.startswith(header)
    assert len(data) == len(header) + 50 * 40
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["(10, 10) at 13,13", "(30, 10) at 33,13", "(20, 30) at 23,33"]


def test_main_random_is_reproducible(tmp_path):
    outputs = []
    for name in ("a.pgm", "b.pgm"):
        out = tmp_path / name
        main([
            "--width", "60", "--height", "60",
            "--click", "10,10", "--click", "50,10", "--click", "30,50",
            "--random", "2", "--seed", "3", "--output", str(out),
        ])
        outputs.append(out.read_bytes())
    assert outputs[0] == outputs[1]


def test_main_without_points_prints_nothing(capsys):
    assert main(["--width", "20", "--height", "20"]) == 0
    assert capsys.readouterr().out == ""