"""Basic usage examples for typewrap."""

from typewrap import (
    TypeValidationError, ArrayOf, instance_of, set_validation_enabled, signature, typed,
)


class Point:
    def __init__(self, x, y):
        self.x = x
        self.y = y


# Example 1: Simple function typing
@signature("int", "int").returns("int")
def add(x, y):
    """Add two integers."""
    return x + y


# Example 2: Arrays
@signature(["double"]).returns("double")
def mean(values):
    """Average of a list of numbers."""
    return sum(values) / len(values)


# Example 3: Classes, explicit and from a sample value
@signature(ArrayOf(Point), instance_of(Point(0, 0))).returns([Point])
def translate(points, offset):
    return [Point(p.x + offset.x, p.y + offset.y) for p in points]


# Example 4: Textual signatures
@typed("(string, int) -> string")
def repeat(text, times):
    return text * times


# Example 5: Higher-order functions
is_positive = signature("int").returns("bool")(lambda x: x > 0)


@typed("((int) -> bool, [int]) -> [int]")
def keep(pred, items):
    """Filter a list with a guarded predicate."""
    return [x for x in items if pred(x)]


# Example 6: Validation errors
def error_examples():
    """Demonstrate call-time errors."""
    for call in (lambda: add(1, 2.5), lambda: add(1), lambda: keep(lambda x: True, [1])):
        try:
            call()
        except TypeValidationError as e:
            print(f"  {type(e).__name__}: {e}")


if __name__ == "__main__":
    print(f"add(1, 2) = {add(1, 2)}")
    print(f"mean([1, 2.5, 3]) = {mean([1, 2.5, 3])}")
    moved = translate([Point(1, 1), Point(2, 3)], Point(10, 10))
    print(f"translate(...) = {[(p.x, p.y) for p in moved]}")
    print(f"repeat('ab', 3) = {repeat('ab', 3)}")
    print(f"keep(is_positive, [3, -1, 4]) = {keep(is_positive, [3, -1, 4])}")

    print("\nValidation errors:")
    error_examples()

    # Trusted mode: guards become pass-through
    set_validation_enabled(False)
    print(f"\nadd('a', 'b') with validation off = {add('a', 'b')}")
