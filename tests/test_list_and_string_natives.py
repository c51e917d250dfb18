import pytest

from mankai.errors import MankaiArityError, MankaiTypeError


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(list)", []),
        ("(list 1 2 3)", [1, 2, 3]),
        ('(list 1 "a" (list))', [1, "a", []]),
        ("(car (list 1 2 3))", 1),
        ("(car (list (list 1) 2))", [1]),
        ("(cdr (list 1 2 3))", [2, 3]),
        ("(cdr (list 1))", []),
        ("(cons (list 1 2) 3)", [1, 2, 3]),
        ("(cons (list) 1 2 3)", [1, 2, 3]),
        ("(car (cons (list) 1 2 3))", 1),
        ("(cons (list 1) (list 2))", [1, [2]]),
        ('(string-concat "foo")', "foo"),
        ('(string-concat "foo" "bar" "baz")', "foobarbaz"),
        ('(string-concat "" "")', ""),
    ]
)
def test_list_and_string_natives(interp, source, expected):
    assert interp.eval(source) == expected


def test_lists_are_not_mutated(interp):
    interp.eval("(set! xs (list 1 2))")
    interp.eval("(set! ys (cons xs 3))")
    interp.eval("(set! zs (cdr xs))")
    assert interp.eval("xs") == [1, 2]
    assert interp.eval("ys") == [1, 2, 3]
    assert interp.eval("zs") == [2]


@pytest.mark.parametrize("op", ["car", "cdr"])
@pytest.mark.parametrize("arg", ["(list)", "1", '"abc"', "true"])
def test_car_cdr_require_non_empty_list(interp, op, arg):
    with pytest.raises(MankaiTypeError, match=f"'{op}' requires a non-empty list"):
        interp.eval(f"({op} {arg})")


@pytest.mark.parametrize("op", ["car", "cdr"])
def test_car_cdr_arity(interp, op):
    with pytest.raises(MankaiArityError, match=f"found 2 arguments but '{op}' requires 1"):
        interp.eval(f"({op} (list 1) (list 2))")


def test_cons_arity(interp):
    with pytest.raises(MankaiArityError, match="found 1 arguments but 'cons' requires at least 2"):
        interp.eval("(cons (list))")


def test_cons_requires_list_first(interp):
    with pytest.raises(MankaiTypeError, match="first argument of 'cons' must be a list"):
        interp.eval("(cons 1 2)")


def test_string_concat_errors(interp):
    with pytest.raises(MankaiArityError):
        interp.eval("(string-concat)")
    with pytest.raises(MankaiTypeError, match="argument 2 of 'string-concat'"):
        interp.eval('(string-concat "a" 1)')
