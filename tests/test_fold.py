from __future__ import annotations

import importlib.util
import unittest


JAX_AVAILABLE = importlib.util.find_spec("jax") is not None


class CountingList(list):
    """List that records every indexed read."""

    def __init__(self, *args) -> None:
        super().__init__(*args)
        self.reads = 0

    def __getitem__(self, index):
        self.reads += 1
        return super().__getitem__(index)


@unittest.skipUnless(JAX_AVAILABLE, "jax is required for fold tests")
class ReduceTests(unittest.TestCase):
    def test_rejects_non_sequence(self) -> None:
        from hof_jax import InvalidArgument, reduce

        for bad in (None, 5, "0123", {"a": 1}, {1, 2}):
            with self.subTest(bad=bad):
                with self.assertRaises(InvalidArgument):
                    reduce(bad, lambda a, b: a + b)

    def test_rejects_non_callable_reducer_before_reading_elements(self) -> None:
        from hof_jax import InvalidArgument, reduce

        source = CountingList([0, 1, 2, 3, 4, 5])
        with self.assertRaises(InvalidArgument) as ctx:
            reduce(source, None)
        self.assertEqual(source.reads, 0)
        self.assertIn("reducer", str(ctx.exception))

    def test_invalid_argument_is_a_type_error(self) -> None:
        from hof_jax import reduce

        with self.assertRaises(TypeError):
            reduce(None, lambda a, b: a)

    def test_empty_sequence_without_initial_value_is_invalid_state(self) -> None:
        from hof_jax import InvalidState, reduce

        calls: list[object] = []
        with self.assertRaises(InvalidState) as ctx:
            reduce([], lambda a, b: calls.append(b))
        self.assertIn("initial value", str(ctx.exception))
        self.assertEqual(calls, [])

    def test_none_initial_value_counts_as_absent(self) -> None:
        from hof_jax import InvalidState, reduce

        with self.assertRaises(InvalidState):
            reduce([], lambda a, b: a, None)
        self.assertEqual(reduce([1, 2, 3], lambda a, b: a + b, None), 6)

    def test_empty_sequence_returns_initial_value(self) -> None:
        from hof_jax import reduce

        seed = "this should be returned."
        self.assertEqual(reduce([], lambda a, b: b, seed), seed)

    def test_sums_without_initial_value(self) -> None:
        from hof_jax import reduce

        self.assertEqual(reduce([0, 1, 2, 3, 4, 5], lambda a, b: a + b), 15)
        self.assertEqual(reduce([5, 6, 7, 8], lambda a, b: a + b), 26)

    def test_initial_value_is_folded_in_first(self) -> None:
        from hof_jax import reduce

        self.assertEqual(reduce([5, 6, 7, 8], lambda a, b: a + b, 4), 30)
        self.assertEqual(reduce(["b", "c"], lambda a, b: a + b, "a"), "abc")

    def test_falsy_initial_values_are_present(self) -> None:
        from hof_jax import reduce

        self.assertIs(reduce([True], lambda x, y: x and y, False), False)
        self.assertEqual(reduce([3], lambda a, b: a * b, 0), 0)
        self.assertEqual(reduce(["x"], lambda a, b: a + b, ""), "x")
        self.assertEqual(reduce([1], lambda a, b: a + [b], []), [1])

    def test_reducer_receives_index(self) -> None:
        from hof_jax import reduce

        self.assertEqual(reduce([0, 1, 2, 3], lambda p, c, i: p + (c * i)), 14)

    def test_reducer_receives_source_sequence(self) -> None:
        from hof_jax import reduce

        def inner_sum(previous, current, index, array):
            return previous if index in (0, len(array) - 1) else previous + current

        self.assertEqual(reduce([0, 1, 2, 3], inner_sum), 3)

    def test_visits_indices_left_to_right(self) -> None:
        from hof_jax import reduce

        seen: list[int] = []

        def record(acc, _current, index):
            seen.append(index)
            return acc

        reduce(["a", "b", "c"], record)
        self.assertEqual(seen, [1, 2])
        seen.clear()
        reduce(["a", "b", "c"], record, "")
        self.assertEqual(seen, [0, 1, 2])

    def test_does_not_mutate_input(self) -> None:
        from hof_jax import reduce

        source = [3, 1, 2]
        reduce(source, lambda a, b: a + b)
        self.assertEqual(source, [3, 1, 2])

    def test_accepts_tuples_and_ranges(self) -> None:
        from hof_jax import reduce

        self.assertEqual(reduce((1, 2, 3), lambda a, b: a * b), 6)
        self.assertEqual(reduce(range(5), lambda a, b: a + b), 10)

    def test_reducer_errors_propagate(self) -> None:
        from hof_jax import reduce

        def boom(_acc, _current):
            raise KeyError("inner")

        with self.assertRaises(KeyError):
            reduce([1, 2], boom)


if __name__ == "__main__":
    unittest.main()
