import unittest
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import patch

from hanoi_solver.errors import InternalConsistencyError, InvalidDiskCount
from hanoi_solver.models import Move, Rod
from hanoi_solver.solving import RodState, generate_solution, iter_moves
from hanoi_solver.solving.solver import _solve_hanoi


def replay_on_plain_lists(moves, n):
    """Independent replay: returns final rods or raises AssertionError."""
    index = {"A": 0, "B": 1, "C": 2}
    rods = [list(range(n, 0, -1)), [], []]
    for move in moves:
        src = rods[index[move.source]]
        dst = rods[index[move.target]]
        assert src, f"move {move.id} takes from empty rod {move.source}"
        disk = src.pop()
        assert disk == move.disk, f"move {move.id} records disk {move.disk}, top was {disk}"
        assert not dst or dst[-1] > disk, f"move {move.id} puts {disk} on {dst[-1]}"
        dst.append(disk)
    return rods


class TestGenerateSolution(unittest.TestCase):
    def test_move_count_is_minimal(self):
        """Every supported size produces 2^n - 1 moves."""
        for n in range(1, 9):
            with self.subTest(n=n):
                solution = generate_solution(n)
                self.assertEqual(len(solution.moves), 2 ** n - 1)
                self.assertEqual(solution.total_moves, 2 ** n - 1)
                self.assertEqual(solution.number_of_disks, n)

    def test_moves_replay_legally_to_rod_c(self):
        for n in range(1, 9):
            with self.subTest(n=n):
                rods = replay_on_plain_lists(generate_solution(n).moves, n)
                self.assertEqual(rods, [[], [], list(range(n, 0, -1))])

    def test_solutions_are_valid(self):
        for n in range(1, 9):
            with self.subTest(n=n):
                solution = generate_solution(n)
                self.assertTrue(solution.is_valid)
                self.assertEqual(solution.source, "generated")

    def test_out_of_range_rejected(self):
        for n in (0, 9, -3):
            with self.subTest(n=n):
                with self.assertRaises(InvalidDiskCount) as ctx:
                    generate_solution(n)
                self.assertIn("between 1 and 8", str(ctx.exception))

    def test_non_integer_rejected(self):
        for value in (3.0, "3", None, True):
            with self.subTest(value=value):
                with self.assertRaises(InvalidDiskCount) as ctx:
                    generate_solution(value)
                self.assertIn("must be an integer", str(ctx.exception))

    def test_invalid_disk_count_is_a_value_error(self):
        with self.assertRaises(ValueError):
            generate_solution(9)

    def test_deterministic(self):
        self.assertEqual(generate_solution(6).moves, generate_solution(6).moves)

    def test_move_ids_sequential_from_one(self):
        moves = generate_solution(5).moves
        self.assertEqual([m.id for m in moves], list(range(1, len(moves) + 1)))

    def test_one_disk(self):
        moves = generate_solution(1).moves
        self.assertEqual(len(moves), 1)
        self.assertEqual((moves[0].disk, moves[0].source, moves[0].target), (1, "A", "C"))
        self.assertEqual(moves[0].description, "Take disk 1 from rod A to rod C")

    def test_two_disks(self):
        moves = generate_solution(2).moves
        self.assertEqual(
            [(m.disk, m.source, m.target) for m in moves],
            [(1, "A", "B"), (2, "A", "C"), (1, "B", "C")],
        )

    def test_three_disks(self):
        solution = generate_solution(3)
        self.assertEqual(len(solution.moves), 7)
        last = solution.moves[-1]
        self.assertEqual(last.target, "C")
        self.assertEqual(solution.moves[3], Move(4, "A", "C", 3, "Take disk 3 from rod A to rod C"))
        self.assertTrue(solution.is_valid)

    def test_max_disks_override(self):
        solution = generate_solution(10, max_disks=10)
        self.assertEqual(solution.total_moves, 1023)
        with self.assertRaises(InvalidDiskCount):
            generate_solution(4, max_disks=3)

    def test_bad_max_disks(self):
        with self.assertRaises(ValueError):
            generate_solution(3, max_disks=0)

    @patch.dict("os.environ", {"HANOI_MAX_DISKS": "4"})
    def test_bound_from_environment(self):
        self.assertEqual(generate_solution(4).total_moves, 15)
        with self.assertRaises(InvalidDiskCount) as ctx:
            generate_solution(5)
        self.assertIn("between 1 and 4", str(ctx.exception))

    def test_empty_rod_is_internal_error(self):
        """A simulation that starts with no disks cannot emit a move."""
        with patch.object(RodState, "initial", return_value=RodState()):
            with self.assertRaises(InternalConsistencyError):
                generate_solution(3)

    def test_concurrent_calls_do_not_share_state(self):
        expected = {n: generate_solution(n).moves for n in range(1, 9)}
        with ThreadPoolExecutor(max_workers=8) as executor:
            sizes = list(range(1, 9)) * 4
            results = list(executor.map(generate_solution, sizes))
        for n, solution in zip(sizes, results):
            self.assertEqual(solution.moves, expected[n])


class TestSolveHanoiGuards(unittest.TestCase):
    def test_repeated_rod_roles_do_nothing(self):
        rods = RodState.initial(3)
        moves = []
        _solve_hanoi(3, Rod.A, Rod.A, Rod.B, rods, moves)
        self.assertEqual(moves, [])
        self.assertEqual(rods.rods, [[3, 2, 1], [], []])

    def test_out_of_range_rod_roles_do_nothing(self):
        rods = RodState.initial(2)
        moves = []
        _solve_hanoi(2, 0, 3, 1, rods, moves)
        self.assertEqual(moves, [])
        self.assertEqual(rods.rods, [[2, 1], [], []])

    def test_zero_disks_emits_nothing(self):
        rods = RodState.initial(2)
        moves = []
        _solve_hanoi(0, Rod.A, Rod.C, Rod.B, rods, moves)
        self.assertEqual(moves, [])


class TestIterMoves(unittest.TestCase):
    def test_matches_recursive_solution(self):
        for n in (1, 2, 5, 8):
            with self.subTest(n=n):
                self.assertEqual(tuple(iter_moves(n)), generate_solution(n).moves)

    def test_is_lazy(self):
        gen = iter_moves(25)
        first = next(gen)
        # Odd disk counts move disk 1 straight to the target rod first
        self.assertEqual((first.id, first.disk, first.source, first.target), (1, 1, "A", "C"))
        gen.close()

    def test_large_puzzle_replays(self):
        n = 12
        rods = replay_on_plain_lists(iter_moves(n), n)
        self.assertEqual(rods[2], list(range(n, 0, -1)))

    def test_stream_bound(self):
        with self.assertRaises(InvalidDiskCount):
            next(iter_moves(31))
        with self.assertRaises(InvalidDiskCount):
            next(iter_moves(0))


if __name__ == "__main__":
    unittest.main()
