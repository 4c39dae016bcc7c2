import pytest
from kitchenconv.errors import ConversionSyntaxError, UsageError
from kitchenconv.parsing import tokenize_args


def test_minimal():
    req = tokenize_args(["10", "kg", "to", "lb"])
    assert req.quantity == "10"
    assert req.unit_from == "kg"
    assert req.unit_to == "lb"
    assert req.substance_from is None
    assert req.substance_to is None
    assert req.substance is None

def test_lowercases_everything():
    req = tokenize_args(["400", "F", "IN", "C"])
    assert (req.unit_from, req.unit_to) == ("f", "c")

def test_source_substance_with_of():
    req = tokenize_args(["3", "ts", "of", "Sugar", "to", "g"])
    assert req.substance_from == "sugar"
    assert req.substance == "sugar"

def test_target_substance():
    req = tokenize_args(["100", "g", "to", "cup", "of", "flour"])
    assert req.substance_from is None
    assert req.substance_to == "flour"
    assert req.substance == "flour"

def test_source_substance_wins():
    req = tokenize_args(["1", "tbs", "butter", "to", "g", "sugar"])
    assert req.substance == "butter"

def test_too_few_tokens():
    with pytest.raises(UsageError):
        tokenize_args(["10", "kg", "lb"])
    with pytest.raises(UsageError):
        tokenize_args([])

def test_usage_is_syntax_error():
    assert issubclass(UsageError, ConversionSyntaxError)

def test_double_separator():
    with pytest.raises(ConversionSyntaxError) as exc:
        tokenize_args(["10", "kg", "to", "lb", "in", "g"])
    assert "multiple" in str(exc.value)

def test_too_many_tokens_before_separator():
    with pytest.raises(ConversionSyntaxError):
        tokenize_args(["1", "cup", "brown", "sugar", "to", "g"])

def test_too_many_tokens_after_separator():
    with pytest.raises(ConversionSyntaxError):
        tokenize_args(["1", "cup", "to", "g", "of", "brown", "sugar"])

def test_missing_separator():
    with pytest.raises(ConversionSyntaxError):
        tokenize_args(["1", "cup", "flour", "g"])

def test_missing_target_unit():
    with pytest.raises(ConversionSyntaxError):
        tokenize_args(["1", "cup", "flour", "to"])
