"""Test guarded function calls."""

import logging

import pytest

from typewrap import (
    ArgumentTypeMismatch, ArityMismatch, GuardedFunction, ReturnTypeMismatch,
    TypeValidationError, is_guarded, signature, signature_of,
)


@pytest.fixture
def add():
    return signature("int", "int").returns("int")(lambda a, b: a + b)


@pytest.mark.integration
class TestEndToEnd:
    """Test the basic add example."""

    def test_valid_call(self, add):
        assert add(2, 3) == 5

    def test_bad_argument(self, add):
        with pytest.raises(ArgumentTypeMismatch) as excinfo:
            add(2, 3.5)
        assert excinfo.value.position == 2
        assert excinfo.value.index == 1
        assert excinfo.value.expected == "int"
        assert excinfo.value.value == 3.5

    def test_bad_arity(self, add):
        with pytest.raises(ArityMismatch) as excinfo:
            add(2)
        assert excinfo.value.expected == 2
        assert excinfo.value.actual == 1


@pytest.mark.unit
class TestArity:
    """Test argument count enforcement."""

    @pytest.mark.parametrize("args", [(), (1,), (1, 2, 3), ("a",), ("a", "b", "c", "d")])
    def test_wrong_count_always_fails(self, add, args):
        with pytest.raises(ArityMismatch):
            add(*args)

    def test_arity_checked_before_types(self):
        guarded = signature("int")(lambda x: x)
        with pytest.raises(ArityMismatch):
            guarded("a", "b")

    def test_zero_arguments(self):
        guarded = signature().returns("string")(lambda: "ok")
        assert guarded() == "ok"
        with pytest.raises(ArityMismatch):
            guarded(1)

    def test_keyword_arguments_rejected(self, add):
        with pytest.raises(TypeError):
            add(a=1, b=2)


@pytest.mark.unit
class TestArguments:
    """Test positional argument checks."""

    def test_first_failure_is_reported(self):
        guarded = signature("int", "int", "int")(lambda a, b, c: None)
        with pytest.raises(ArgumentTypeMismatch) as excinfo:
            guarded("a", 1, "b")
        assert excinfo.value.index == 0

    def test_later_failure(self):
        guarded = signature("int", "int", "int")(lambda a, b, c: None)
        with pytest.raises(ArgumentTypeMismatch) as excinfo:
            guarded(1, 2, "c")
        assert excinfo.value.index == 2
        assert excinfo.value.position == 3

    def test_target_not_called_on_failure(self):
        calls = []
        guarded = signature("string")(calls.append)
        with pytest.raises(ArgumentTypeMismatch):
            guarded(1)
        assert calls == []

    def test_class_argument(self, point_cls, point3d_cls):
        norm = signature(point_cls).returns("double")(lambda p: (p.x ** 2 + p.y ** 2) ** 0.5)
        assert norm(point_cls(3, 4)) == 5.0
        assert norm(point3d_cls(3, 4, 0)) == 5.0
        with pytest.raises(ArgumentTypeMismatch):
            norm((3, 4))

    def test_array_argument(self):
        total = signature(["int"]).returns("int")(sum)
        assert total([1, 2, 3]) == 6
        with pytest.raises(ArgumentTypeMismatch):
            total([1, 2.5])

    def test_literal_argument(self):
        only_five = signature(5)(lambda x: x)
        assert only_five(5) == 5
        with pytest.raises(ArgumentTypeMismatch):
            only_five(4)


@pytest.mark.unit
class TestReturn:
    """Test return value checks."""

    def test_return_mismatch(self):
        guarded = signature("int").returns("string")(lambda x: x)
        with pytest.raises(ReturnTypeMismatch) as excinfo:
            guarded(5)
        assert excinfo.value.expected == "string"
        assert excinfo.value.value == 5

    def test_no_return_check_without_declaration(self):
        guarded = signature("int")(lambda x: "anything")
        assert guarded(1) == "anything"

    def test_result_returned_unchanged(self):
        result = object()
        guarded = signature()(lambda: result)
        assert guarded() is result


@pytest.mark.unit
class TestTargetErrors:
    """Test that errors raised by the target pass through."""

    def test_exception_propagates_unchanged(self):
        error = ValueError("boom")

        def fail(x):
            raise error

        guarded = signature("int").returns("int")(fail)
        with pytest.raises(ValueError) as excinfo:
            guarded(1)
        assert excinfo.value is error

    def test_target_type_error_is_not_wrapped(self):
        guarded = signature("int")(lambda x: x + "a")
        with pytest.raises(TypeError) as excinfo:
            guarded(1)
        assert not isinstance(excinfo.value, TypeValidationError)


@pytest.mark.unit
class TestDiagnostics:
    """Test error context."""

    def test_function_name_in_message(self):
        @signature("int")
        def scale(x):
            return x

        with pytest.raises(ArgumentTypeMismatch) as excinfo:
            scale("big")
        assert excinfo.value.function.endswith("scale")
        assert "scale" in str(excinfo.value)
        assert "argument 1" in str(excinfo.value)

    def test_caller_location(self, add):
        with pytest.raises(ArityMismatch) as excinfo:
            add(1, 2, 3)
        assert "test_05_guard.py" in excinfo.value.location

    def test_all_errors_are_type_errors(self, add):
        with pytest.raises(TypeError):
            add("1", 2)


@pytest.mark.unit
class TestHigherOrder:
    """Test signatures as parameter types."""

    def test_function_argument(self):
        apply = signature(signature("int").returns("int"), "int").returns("int")(lambda f, x: f(x))
        inc = signature("int").returns("int")(lambda x: x + 1)
        assert apply(inc, 1) == 2

    def test_unguarded_function_argument(self):
        apply = signature(signature("int").returns("int"), "int")(lambda f, x: f(x))
        with pytest.raises(ArgumentTypeMismatch) as excinfo:
            apply(lambda x: x, 1)
        assert excinfo.value.index == 0
        assert "(int) -> int" in str(excinfo.value)

    def test_function_result(self):
        make_adder = signature("int").returns(signature("int").returns("int"))(
            lambda n: signature("int").returns("int")(lambda x: x + n)
        )
        assert make_adder(2)(3) == 5

    def test_function_result_wrong_shape(self):
        bad_factory = signature().returns(signature("int").returns("int"))(
            lambda: signature("string")(lambda s: s)
        )
        with pytest.raises(ReturnTypeMismatch):
            bad_factory()


@pytest.mark.unit
class TestIntrospection:
    """Test guarded function introspection."""

    def test_is_guarded(self, add):
        assert is_guarded(add)
        assert not is_guarded(lambda: None)

    def test_signature_of(self, add):
        assert repr(signature_of(add)) == "(int, int) -> int"
        assert signature_of(len) is None

    def test_repr(self):
        @signature("int")
        def ident(x):
            return x

        assert "ident" in repr(ident)
        assert "(int)" in repr(ident)

    def test_non_callable(self):
        with pytest.raises(TypeError):
            GuardedFunction(signature(), 42)

    def test_guarding_a_guard(self):
        inner = signature("double").returns("double")(lambda x: x / 2)
        outer = signature("int").returns("double")(inner)
        assert outer.signature is not inner.signature
        assert outer(4) == 2.0
        with pytest.raises(ArgumentTypeMismatch):
            outer(1.5)


@pytest.mark.unit
class TestSelfReferentialSignature:
    """Test guards built from a signature that returns its own shape."""

    def test_argument_mismatch(self):
        sig = signature("int")
        sig.returns(sig)
        takes = signature(sig)(lambda f: f)
        with pytest.raises(ArgumentTypeMismatch) as excinfo:
            takes(42)
        assert "(int) -> ..." in str(excinfo.value)

    def test_returns_with_debug_logging(self, caplog):
        sig = signature("int")
        with caplog.at_level(logging.DEBUG, logger="typewrap"):
            assert sig.returns(sig) is sig
        assert "(int) -> ..." in caplog.text
