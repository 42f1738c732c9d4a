# algoplay

Classic algorithm exercises, a few small thread-coordination patterns and an
in-memory partitioned Bloom filter, written as plain Python functions and
classes. There are no third-party dependencies.

## Modules

### Data structures

- `algoplay.listnode` – `ListNode`, a dataclass node of a singly linked list
  of integers. `ListNode.from_values(values)` builds a list and returns its
  head (or `None` for no values); iterating a node yields the values from it
  to the end, and `to_list()` returns them as a list.
- `algoplay.stack` – `Stack(capacity)`, a bounded LIFO stack. `push` raises
  `StackFullError` when the capacity is reached, `pop` returns `None` on an
  empty stack, `len()` gives the size and `full()` is true once one more push
  would reach the capacity.
- `algoplay.playback` – `SafeQueue`, a lock-guarded FIFO queue (`push`, `pop`
  returning `None` when empty, `len()`), and `Player`, which queues items
  with `listen(item)` and plays the oldest one with `play()`, passing it to an
  optional `handler` callable and returning it.

### Problems

- `algoplay.linked_lists` – `merge_two_lists`, `merge_k_lists` (pairwise
  divide and conquer), `merge_k_lists_sequential`, `reverse_k_group`,
  `reorder_list` (rewrites values in place), `remove_nth_from_end`,
  `rotate_right`, `swap_pairs` (swaps values in place) and
  `add_two_numbers` (little-endian digit lists).
- `algoplay.arrays` – `two_sum`, `three_sum`, `three_sum_closest`,
  `four_sum`, `max_area`, `can_jump`, `merge_intervals`, `merge_sorted`,
  `find_median_sorted_arrays`, `first_missing_positive` and
  `maximum_units`.
- `algoplay.string_problems` – `is_valid` (bracket matching),
  `longest_valid_parentheses`, `length_of_longest_substring`,
  `longest_common_prefix`, `reverse_integer` (0 outside the 32-bit signed
  range), `divide` (truncated quotient without `/`, `*` or `%`; the minimum
  32-bit value divided by -1 is clamped to the maximum) and `reverse_string`
  (reverses a mutable sequence such as a `bytearray` in place).
- `algoplay.dynamic` – `climb_stairs`, `min_cost_climbing_stairs`,
  `tribonacci`, `rob`, `max_profit`, `unique_paths`,
  `unique_paths_with_obstacles`, `min_path_sum`, `minimum_total` and
  `longest_palindrome`.
- `algoplay.primes` – a generator pipeline sieve: `generate()` yields
  2, 3, 4, …; `sieve_filter(numbers, prime)` drops multiples of `prime`;
  `primes(count)` returns the first `count` primes.
- `algoplay.red_packet` – `random_packets(amount, minimum, count, rng=None,
  clamp=False)` splits an amount into `count` packets of at least `minimum`
  each with the double-mean method. Pass a `random.Random` for repeatable
  results; with `clamp=True` the count is lowered to `amount` when it is
  larger.

### Patterns and concurrency

- `algoplay.patterns` – an observer: `Subject(name, observers=None)` calls
  `notify` on each `Observer` when `update(name)` is called; by default it
  holds one `ChangeObserver`, which prints `change name :<name>` to a given
  stream or to standard output. An interceptor chain: `intercept_chain(*intercepts)`
  combines interceptors `f(n, proceed)` into one that runs them in order;
  `process_a`, `process_b` and `process_c` raise `InterceptError` for 1, 2
  and 3 respectively and pass anything else on.
- `algoplay.pools` – `WorkerPool(size)`: `start()` launches `size` worker
  threads, `submit(job)` queues a no-argument callable (blocking while the
  queue is full), and `wait()` waits for every job and closes the pool. Jobs
  that raise are logged and collected in `errors`. The pool also works as a
  context manager. `BoundedGroup(size)` is a wait group whose `add(delta)`
  blocks while all `size` slots are taken; `done()` frees one and `wait()`
  blocks until every member is done.
- `algoplay.coordination` – `take_turns(names, rounds=5)` (threads emitting
  their names in strict rotation), `fan_out(items, workers=4)` (one producer,
  several consumers; returns `(worker_index, item)` pairs),
  `threaded_sum(workers=10, chunk=10)` and `ping_pong(limit=100)` (two
  threads counting alternately; returns `(worker, count)` pairs).

### Bloom filter

- `algoplay.bloom.info` – `BFInfo` holds the item count `n`, false-positive
  rate `p` and `name`; `estimate_params()` derives the bit count `m` and hash
  count `k`, `calculate_parts()` splits the bitmap into `PartInfo` parts of
  at most `PART_BIT_COUNT` (2**32) bits, `hashes(value)` gives `k` positions
  below `m` from chained 64-bit MurmurHash3 (`murmur3_sum64`) with rejection
  sampling, and `locations(value)` maps them to `Location` parts and offsets.
  `BFInfo.create(name, n, p)` does all the sizing in one call. `BloomFilter`
  is the abstract interface: `add`, `adds`, `exists`, `batch_exists`, `clear`.
- `algoplay.bloom.bytefilter` – `Config` (a `BFInfo`; `Config.default()` is
  one million items at p = 0.0001) builds a `BFByte` with
  `get_or_build(data=b"")`: empty data gives an empty filter, otherwise the
  output of `BFByte.marshal()` is restored. Malformed data raises
  `ValueError`.

## Examples

```python
from algoplay.listnode import ListNode
from algoplay.linked_lists import merge_k_lists

lists = [ListNode.from_values(v) for v in ([1, 4, 5], [1, 3, 4], [2, 6])]
print(merge_k_lists(lists).to_list())  # [1, 1, 2, 3, 4, 4, 5, 6]
```

```python
from algoplay.dynamic import unique_paths, min_path_sum

print(unique_paths(3, 7))                               # 28
print(min_path_sum([[1, 3, 1], [1, 5, 1], [4, 2, 1]]))  # 7
```

```python
from algoplay.pools import WorkerPool

results = []
with WorkerPool(2) as pool:
    for i in range(5):
        pool.submit(lambda i=i: results.append(i * i))
print(sorted(results))  # [0, 1, 4, 9, 16]
```

```python
from algoplay.bloom.bytefilter import Config

bloom = Config.default().get_or_build(b"")
bloom.add(b"alice")
print(bloom.exists(b"alice"))  # True

restored = Config.default().get_or_build(bloom.marshal())
print(restored.exists(b"alice"))  # True
```

## What it does not do

- There is no command-line program; everything is used from Python.
- The Bloom filter lives in memory only. It has no connection to any
  external store; to keep it, save the bytes from `marshal()` yourself and
  pass them back to `get_or_build`. That serialised form is this package's
  own (JSON mapping part indexes to base64-encoded sorted 64-bit offsets)
  and is not meant to be read by other bitmap libraries.

## Running the tests

```
pip install -e ".[test]"
pytest
```