from katas.greetings import (
    EnglishBot,
    SpanishBot,
    Square,
    Triangle,
    main,
    print_area,
    print_greeting,
)


class _PirateBot:
    def greeting(self):
        return "Ahoy"


def test_english_greeting():
    assert EnglishBot().greeting() == "Hi there!"


def test_spanish_greeting():
    assert SpanishBot().greeting() == "Hola!"


def test_print_greeting(capsys):
    print_greeting(EnglishBot())
    print_greeting(SpanishBot())
    assert capsys.readouterr().out.splitlines() == ["Hi there!", "Hola!"]


def test_print_greeting_accepts_any_bot(capsys):
    print_greeting(_PirateBot())
    assert capsys.readouterr().out == "Ahoy\n"


def test_triangle_is_half_of_square():
    for side in (1, 3, 10):
        assert Triangle(height=side, base=side).area() * 2 == Square(side_length=side).area()


def test_square_area_pinned():
    assert Square(side_length=10).area() == 100


def test_print_area_labels(capsys):
    print_area(Square(side_length=10))
    print_area(Triangle(height=10, base=10))
    square_line, triangle_line = capsys.readouterr().out.splitlines()
    assert square_line.startswith("Area of Square is : ")
    assert square_line.endswith(" 100")
    assert triangle_line.startswith("Area of triangle is : ")


def test_print_area_non_integral(capsys):
    print_area(Triangle(height=1, base=1))
    out = capsys.readouterr().out
    assert out.strip().endswith(str(Triangle(height=1, base=1).area()))


def test_main(capsys):
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[:2] == ["Hi there!", "Hola!"]
    assert len(lines) == 4