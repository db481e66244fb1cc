# estudos

A collection of classic data structures and algorithms, plus a few small
experiments that turn procedurally generated images into animations and
sounds.

## Installation

```sh
pip install .
```

To run the test suite:

```sh
pip install ".[test]"
pytest
```

## Data structures

| Module | Contents |
| --- | --- |
| `estudos.linked_list` | `DoubleLinkedList`, `LinkedListEval` (adds `index_of` and `remove_value`), `IndexOutOfRangeError` |
| `estudos.stack` | `Stack` (`push`, `pop`) built on the linked list |
| `estudos.queue_list` | `Queue` (`enqueue`, `dequeue`) built on the linked list |
| `estudos.hash_table` | `HashTable` of integer keys with chained buckets (`insert`, `delete`, `search`) |
| `estudos.heap` | `MaxHeap` of `Item`s (value and priority) and a `MinHeap` of ordered values |
| `estudos.binary_search_tree` | `BinarySearchTree` (keeps duplicates) and its `BSTNode` |
| `estudos.avl_tree` | self-balancing `AVLTree` (ignores duplicates) |
| `estudos.graph` | directed weighted `Graph` of `Vertex` and `Edge`, with depth-first path search |

Some behaviour worth knowing:

- List indices run from `0` to `len(list)` inclusive; the index equal to the
  length refers to the last node. Indices outside that range raise
  `IndexOutOfRangeError`. `get` on an empty list returns `None`, and `set` on
  an empty list appends the value.
- `Stack.pop`, `Queue.dequeue` and `MinHeap.pull` return `None` when empty.
- `MaxHeap.pop` returns the item with the *lowest* priority first and raises
  `IndexError` when empty.
- `HashTable` puts a key in bucket `key & size`; a key whose bucket falls
  outside the table raises `IndexError`.
- `BinarySearchTree.search` returns the matching `BSTNode` or `None`.

```python
from estudos.linked_list import LinkedListEval
from estudos.stack import Stack

items = LinkedListEval()
for value in (0, -10, 69, 420):
    items.append(value)
items.prepend(69420)
print(items.get(0), items.index_of(69420), len(items))  # 69420 0 5

stack = Stack()
stack.push("first")
stack.push("last")
print(stack.pop())  # last
```

```python
from estudos.graph import Graph

graph = Graph()
bh = graph.add_vertex("bh")
rio = graph.add_vertex("rio")
sp = graph.add_vertex("sp")
graph.add_edge(bh, rio, 498)
graph.add_edge(rio, sp, 529)
path = graph.dfs(bh, sp)  # [bh, rio, sp]
```

## Algorithms

| Module | Contents |
| --- | --- |
| `estudos.searching` | `binary_search` and `linear_search`, returning the index or `-1` |
| `estudos.sorting` | in-place `bubble_sort`, `merge_sort`, `quick_sort`, `selection_sort`, `swap`, plus `bubble_sort_visualization` and `selection_sort_visual`, which call a callback after every comparison |
| `estudos.concurrency` | in-place `parallel_merge_sort` and `parallel_quick_sort`, sorting parts on worker threads |
| `estudos.maze` | `solve_maze` finds a path of `Point`s through a text maze, trying up, right, down, left |
| `estudos.two_crystal` | `two_crystal_balls` finds the first `True` in a false-then-true sequence in √n jumps |

```python
from estudos.searching import binary_search
from estudos.sorting import selection_sort

words = ["abelha", "urso", "abobora", "limao", "zebra"]
selection_sort(words)
print(words)                           # ['abelha', 'abobora', 'limao', 'urso', 'zebra']
print(binary_search(words, "limao"))   # 2
```

## Small utilities

- `estudos.nullable` – `Nullable` values; `to_json` gives compact JSON, or
  `null` when unset. `parse_nullable` reads one back from JSON text (`str` or
  `bytes`) and raises `ValueError` on invalid JSON.
- `estudos.slicing` – `slicing_with_if` and `slicing_with_min` return at most
  `count` leading items (a negative count raises `ValueError`); `minimum`.
- `estudos.generic_sum` – `sum_numbers(a, b, result_type)` adds an `int` or
  `float` pair and converts the result to `int` or `float`; other types raise
  `TypeError`.

## Images and sound

- `estudos.vector` – immutable `Vec2` and `Vec3` with `length`, `scalar`,
  `sub`/`add`, `div` and `multiply` (dot product).
- `estudos.calc` – `step`, `smooth_step`, `fract2`, `fract3`.
- `estudos.shader` – the `circles` shader, returning a 16-bit RGBA tuple for a
  pixel, and its cosine `palette`.
- `estudos.animation` – `gen_images` renders palette frames with a shader,
  `create_gif` writes them as a looping `animation.gif` in a directory, and
  `measure_execution_time` times a call.
- `estudos.image_sound` – `pixel_frequencies` and `image_to_wav` turn every
  pixel of an image into a one-second 16-bit mono 44.1 kHz tone.
- `estudos.noise_sound` – `make_noise_image` builds a patterned RGBA image and
  `red_channel_samples` returns its red values.

## Commands

```sh
estudos-animation [--frames 100] [--width 640] [--height 360] [--output save/]
estudos-image-sound [image.png] [image.wav]
estudos-noise-sound [image.wav]
```

- `estudos-animation` renders the circles shader and writes
  `animation.gif` into the output directory, which must already exist.
- `estudos-image-sound` reads an image and writes one tone per pixel to the
  WAV file.
- `estudos-noise-sound` builds the noise image and writes a WAV file with a
  44.1 kHz 16-bit mono header and no samples.

## What it does not do

The step callbacks of `bubble_sort_visualization` and
`selection_sort_visual` are only hooks: the package has no screen or
terminal view that draws a sort as it runs.