# algolab

A collection of classic algorithms and data structures, plus two small
command-line tools: a CPU scheduling simulator and a Sobel edge filter for
24-bit BMP images. It has no third-party dependencies.

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
| `algolab.search` | `BinarySearcher`, `fibonacci_search`, `quickselect` |
| `algolab.number_theory` | `ext_euclidean`, `fibonacci_mod`, `binomial`, `josephus`, `josephus_recursive`, `josephus_order`, `hanoi_moves` |
| `algolab.combinatorics` | `subsets`, `swap_permutations`, `rotation_permutations`, `combinations` |
| `algolab.sorting` | `heap_sort`, `merge_sort`, `quick_sort` (each returns a new list) |
| `algolab.strings` | `failure_function`, `kmp_count` |
| `algolab.geometry` | `kth_closest_distance` |
| `algolab.bst` | `BinarySearchTree` |
| `algolab.binary_tree` | `TreeNode`, `build_from_inorder_postorder`, `build_from_preorder_inorder`, `preorder`, `postorder` |
| `algolab.doubly_linked_list` | `DoublyLinkedList` with a movable cursor |
| `algolab.linked_list` | `Node`, `LinkedList` |
| `algolab.circular_queue` | `CircularQueue`, `QueueFull`, `QueueEmpty` |
| `algolab.sparse_matrix` | `MatrixTerm`, `SparseMatrix` |
| `algolab.scheduling` | `Process`, `ScheduleResult`, `sjf`, `srtf`, `round_robin`, `parse_input`, `render_result`, `format_average` |
| `algolab.bmp` | `BmpImage`, `read_bmp`, `write_bmp` |
| `algolab.filters` | `to_grey`, `mean_filter`, `sobel_filter`, `load_mask`, `process_image` |

## Examples

```python
from algolab.search import BinarySearcher
from algolab.sorting import merge_sort
from algolab.strings import kmp_count

searcher = BinarySearcher(sorted([12, 51, 36, 80, 22, 41, 68, 77, 52, 32]))
searcher.search(68, 0, 9)           # 7

merge_sort([1234, 123, 12, 1, 0])   # [0, 1, 12, 123, 1234]

kmp_count("abababab", "abab")       # 3, overlaps included
```

```python
from algolab.number_theory import ext_euclidean, hanoi_moves

g, x, y = ext_euclidean(13, 234)    # 13 * x + 234 * y == g
list(hanoi_moves(2))                # [('A', 'B'), ('A', 'C'), ('B', 'C')]
```

```python
from algolab.scheduling import round_robin, render_result

result = round_robin([0, 1, 2], [5, 3, 1], 2)
print(render_result(result))
```

## Commands

### `algolab-schedule`

```
algolab-schedule {rr,sjf,srtf} INPUT [-o OUTPUT]
```

Reads a whitespace-separated process description from `INPUT`: the number
of processes, then each arrival time, then each burst time, and for `rr` a
time quantum at the end. At most 100 processes are accepted. It writes one
`waiting turnaround` line per process followed by the average waiting and
average turnaround times. Without `-o` the result goes to `ans1.txt` (`sjf`),
`ans2.txt` (`srtf`) or `ans3-2.txt` (`rr`) in the current directory.

### `algolab-filters`

```
algolab-filters [INPUT ...] [--mask MASK] [--output-dir DIR]
```

For each 24-bit BMP input, converts it to grey, smooths it with a 3x3 mean
filter, applies the Sobel kernels from the mask file and writes
`output1.bmp`, `output2.bmp`, … into `DIR` (default: the current directory).
Inputs default to `input1.bmp` … `input5.bmp`, the mask to `mask_Sobel.txt`.
The mask file holds the kernel size (which must be 9), then the nine
horizontal and the nine vertical kernel values.

## What this package does not do

There is no arbitrary-precision integer type, no RSA key generation or
encryption, no graph or vertex-cover routine, and no command for starting
and waiting on child processes. The BMP filters handle only uncompressed
24-bit images and run in a single thread.