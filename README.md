# algokit

A library of classic algorithms and small data structures, written in plain
Python with no third-party dependencies. Every piece is an ordinary function or
class to import and call.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.dynamic` | `rivalry_recursive`, `rivalry_memo`, `rivalry_table`, `rivalry_two_rows`; `cheapest_apples`, `cheapest_apples_memo` (return `math.inf` when the amount cannot be made); `series_sum`, `grid_paths`, `grid_paths_table`, `binomial`, `ways_to_partition`, `stair_ways`, `subset_sum`, `word_break`, `ways_to_pass` |
| `algokit.subarrays` | maximum subarray sums: `max_subarray_brute`, `max_subarray_progressive`, `max_subarray_prefix` (non-empty runs), `max_subarray_divide`, `max_subarray_kadane` (the empty run counts as 0); `max_profit`, `max_profit_k` |
| `algokit.partition` | `linear_partition` into `k` consecutive ranges, `determinant` by cofactor expansion |
| `algokit.arrays` | `majority`, `majority_by_count`, `majority_k`, `longest_consecutive`, `has_subarray_multiple`, `remove_duplicates`, `first_missing_positive`, `product_except_zeros`, `is_rotation`, `find_duplicate_snowflakes` |
| `algokit.monotonic` | `next_greater`, `daily_temperatures`, `largest_histogram` |
| `algokit.ranking` | `UnionFind`, `priority_indices`, `top_k_frequent`, `prime_factors`, `largest_component_size` |
| `algokit.stacks` | `valid_parentheses`, `longest_valid_parentheses`, `simplify_path`, `eval_rpn` (division truncates towards zero) |
| `algokit.strings` | `frequency_sort`, `is_anagram`, `find_naive`, `length_of_last_word`, `reverse_words`, `compress`, `word_pattern`, `full_justify`, `is_palindrome_number`, `roll_string`, `shifting_letters`, `error_rounds` |
| `algokit.search` | `horner_hash`, `rabin_karp`, `brute_search` |
| `algokit.trie` | `Trie` over lowercase ASCII keys, with `put`, `get`, `keys`, `in` and `len` |
| `algokit.bst` | `BSTNode`, `BinarySearchTree` with `insert`, `search`, `delete`, `inorder`, `morris_inorder`, `depth`, `max_width`, `node_count`, `leaf_count`, `minimum` |
| `algokit.binary_tree` | `TreeNode`, `flatten` (in place, pre-order), `zigzag_level_order` |
| `algokit.knight` | `knight_chase`: knight moves to catch a pawn advancing up the board, or `None` |
| `algokit.bounded_stack` | `BoundedStack` with a fixed capacity (default 20) |
| `algokit.expenses` | `ExpenseManager` splitting expenses evenly and reporting balances |
| `algokit.sectors` | `SectorTracker` ranking the top `k` sectors (default 5) by traded value |
| `algokit.combinatorics` | `powerset_indices`, `combinations_of`, `subsets`, `permutations_backtrack`, `permutations_lexicographic`, `count_primes` |
| `algokit.linked` | `ListNode`, `from_iterable`, `to_list`, `merge_sorted`, `reverse` |
| `algokit.rooms` | `Apartment`, `Student`, `assign_rooms`, `assign_rooms_sorted` |
| `algokit.sync_queue` | `ThreadSafeQueue` with `push`, `wait_and_pop`, `try_pop` (raises `queue.Empty`), `is_empty` |
| `algokit.sampling` | `reservoir_sample`, `median` |
| `algokit.text_buffer` | `insert_at_index` into a buffer of `(start, characters)` rows |

Invalid arguments raise `ValueError` (or `IndexError`/`KeyError` where a
position or key is missing) rather than returning sentinel values.

## Examples

```python
from algokit.dynamic import stair_ways, word_break
from algokit.monotonic import next_greater
from algokit.trie import Trie

stair_ways(5)                                   # 8
word_break("applepenapple", ["apple", "pen"])   # True
next_greater([2, 1, 3, 2, 4, 3])                # [3, 3, 4, 4, -1, -1]

trie = Trie()
for word in ("she", "shell", "sell"):
    trie.put(word)
trie.get("sell")    # True
trie.keys()         # ['sell', 'she', 'shell']
```

```python
from algokit.bst import BinarySearchTree

tree = BinarySearchTree()
for value in (5, 3, 8, 1, 4):
    tree.insert(value)
tree.delete(3)
tree.inorder()      # [1, 4, 5, 8]
```

```python
from algokit.bounded_stack import BoundedStack

stack = BoundedStack(2)
stack.push(1)
stack.push(2)
stack.is_full()     # True
stack.pop()         # 2
```

## What it does not do

algokit is a library only: it installs no command-line tool and reads no
input of its own. Interactive use, such as feeding numbers to the reservoir
sampler or building a search tree from typed commands, is left to the calling
code.