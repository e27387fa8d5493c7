# judgekit

judgekit collects compact solutions to well-known online-judge problems. Each one is
a plain Python function or class that takes ordinary Python values and returns the
answer, so the algorithms can be reused, studied, or used to check other solutions.

## Installation

```
pip install .
```

The package needs Python 3.10 or later and has no runtime dependencies.

## Modules

| Module | What it holds |
| --- | --- |
| `judgekit.sorting` | `radix_sort` (byte-wise LSD sort of 32-bit signed integers), `array_is_sorted`, `random_int_array`, `format_array`, `count_inversions` (merge sort), and the problems built on them: `magic_sequence`, `bread_possible`, `permutation_winner` |
| `judgekit.unionfind` | `UnionFind` (disjoint sets with union by rank, path compression and set sizes), `CableNetwork`, and `answer_queries`, `count_suspects`, `run_network` |
| `judgekit.numbers` | `PrimeTable` (sieve with trial division beyond it), `goldbach`, `binary_exponent`, `gp_sum`, `split_bits`, `coin_combinations`, `max_potency_sum`, `max_and_queries` |
| `judgekit.ordering` | custom orderings: `sort_by_modulo`, `rank_classy`, `dyslectionary_sort`, `format_dyslectionary`, `music_sort`, `unsortedness`, `sort_by_unsortedness`, `sideways_sort`, `sort_of_sorting`, `shortest_separator`, `oldest_and_youngest`, `largest_by_acceleration`, `age_sort` |
| `judgekit.contest` | contest bookkeeping: `scoreboard`, `last_blood`, `best_proposal`, `gift_balances`, `flag_quiz_best` |
| `judgekit.grids` | board and matrix problems: `slide_2048`, `funhouse_exit`, `knights_valid`, `apply_matrix_operations`, `war_of_kingdoms`, `classify_transformation`, `describe_transformation`, `tree_rings`, `convolve`, `dance_moves`, `flowshop_finish_times` |
| `judgekit.patterns` | `two_copies_fit`, `successor`, `successive_grid_index` |
| `judgekit.sequences` | `arrows_needed`, `basic_programming`, `servers_needed`, `greedily_increasing`, `height_steps`, `mali_sums`, `mjehuric_swaps`, `is_jolly`, `running_medians`, `count_pivots`, `starting_grid`, `arrange_cards`, `bombardments` |
| `judgekit.strings` | `trim`, `divide_by_power_of_ten`, `mastermind_score`, `ordered_binary_value`, `count_free_parking`, `max_sleep_distance`, `describe_positions` |
| `judgekit.games` | `next_card`, `max_pieces`, `evaluate_bridge_hand`, `wire_direction`, `snail_outcome`, `fuse_check`, `is_secure`, `unique_problems` |

Invalid input is reported by raising `ValueError` (or `ZeroDivisionError` for a zero
modulus in `sort_by_modulo`) rather than by returning a status value.

## Examples

Counting inversions and the swap game built on them:

```python
from judgekit.sorting import count_inversions, permutation_winner

count_inversions([2, 1, 3])    # 1
permutation_winner([2, 1, 3])  # "Marcelo"
```

Disjoint sets:

```python
from judgekit.unionfind import UnionFind

sets = UnionFind(5)
sets.union_set(0, 1)
sets.union_set(1, 2)
sets.is_same_set(0, 2)   # True
sets.size_of_set(0)      # 3
sets.num_disjoint_sets() # 3
```

Primes and Goldbach's conjecture:

```python
from judgekit.numbers import PrimeTable, goldbach

table = PrimeTable(1_000_000)
table.is_prime(97)  # True
goldbach(42, table) # a pair of odd primes summing to 42, or None
```

Modular arithmetic:

```python
from judgekit.numbers import binary_exponent

binary_exponent(2, 10, 1_000_000_007)  # 1024
```

Sliding a 2048 board (0 left, 1 up, 2 right, 3 down):

```python
from judgekit.grids import slide_2048

slide_2048([[2, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]], 0)[0]  # [4, 0, 0, 0]
```

## What the package does not do

There is no command-line program. No function reads problem input from standard input
or writes formatted judge output to standard output; callers parse their input into
Python values, call the functions, and format the results themselves.

## Running the tests

```
pip install ".[test]"
pytest
```