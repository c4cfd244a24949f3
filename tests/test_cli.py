import pytest

from bezierlab.cli import main, parse_points
from bezierlab.errors import InvalidInputError
from bezierlab.geom import Vec2


def test_parse_points():
    assert parse_points("70,250 20,110  220,60") == [Vec2(70, 250), Vec2(20, 110), Vec2(220, 60)]
    with pytest.raises(InvalidInputError):
        parse_points("1,2,3")
    with pytest.raises(InvalidInputError):
        parse_points("a,b")


def test_cli_renders_png(tmp_path):
    out = tmp_path / "fig.png"
    assert main(["aligning", "--points", "0,0 50,80 100,0", "--out", str(out)]) == 0
    assert out.exists()


def test_cli_default_output_name(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["circles_cubic", "--width", "200", "--height", "150"]) == 0
    assert (tmp_path / "circles_cubic.png").exists()


@pytest.mark.parametrize(
    "argv",
    [
        ["aligning", "--points", "1,1"],
        ["aligning", "--points", "1;1 2;2"],
        ["circles_cubic", "--points", "0,0 1,1"],
        ["nope"],
    ],
)
def test_cli_rejects_bad_input(argv, tmp_path):
    with pytest.raises(SystemExit) as exc:
        main(argv + ["--out", str(tmp_path / "x.png")])
    assert exc.value.code == 2
