# herewego

A grab bag of small, self-contained tools:

- **Data structures**: a binary indexed (Fenwick) tree, an LFU cache, a
  monotone deque, a lower-case trie, binary search, list builders and
  bit helpers.
- **Terminal tools**: a single-choice menu, a pager, a stream follower, a
  small input form and a Kubernetes navigator (through `kubectl`) that lists
  namespaces and pods, shows pod logs and opens a shell in a pod.
- **Helpers**: an HTTP echo server, a static file server, a daily job runner,
  a pod shell launcher, a seeded gift draw and a text-command Redis client.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

Python 3.10 or newer is required. The Kubernetes tools run `kubectl`, which
must be on your `PATH` and configured for your cluster.

## Library use

```python
from herewego.bit import BinaryIndexTree
from herewego.lfu import LFUCache
from herewego.search import binary_search
from herewego.trie import TrieNode, replace_words

tree = BinaryIndexTree([1] * 10)
tree.add(9, 10)
print(tree.sum(6, 9))       # sum over the half-open range [6, 9)

cache = LFUCache(capacity=5)
cache.put(1, "a")
print(cache.get(1), len(cache))

print(binary_search([1, 2, 3, 4, 6, 7, 8, 9], 9))   # 7
print(binary_search([1, 2, 3, 4, 6, 7, 8, 9], 5))   # -1

root = TrieNode()
for word in ("cat", "bat", "rat"):
    root.add(word)
print(root.search_prefix("cattle"))     # ['cat', 'cattle']
print(replace_words(["cat", "bat", "rat"], "the cattle was rattled"))
```

Other modules:

- `herewego.bits`: `lowbit`, `subsets` (non-empty submasks) and `lowbits`.
- `herewego.arrays`: `numbers_in_order`, `numbers_shuffled` and `grid`.
- `herewego.monotone.MonotoneDeque` keeps its items strictly decreasing
  according to a comparator you supply.
- `herewego.lfu.MapCache` is an unbounded dictionary cache with the same
  `put` / `get` interface as `LFUCache`.
- `herewego.rediscmd.RedisCommandClient.connect(host, port, password)`
  returns a client whose `execute("keys *")` sends the typed command to Redis
  and returns the reply as text, one item per line for list replies.
- `herewego.kube.KubeNavigator` drives the namespace / function / pod menus
  over a `KubectlBackend`, and can be used with any object offering the same
  methods.

## Commands

| Command               | What it does                                              |
|-----------------------|-----------------------------------------------------------|
| `herewego-select`     | Pick one of notebook / pod / service; prints its key      |
| `herewego-pager`      | Page through 100 numbered lines                           |
| `herewego-kube`       | Browse namespaces and pods; show logs or open a shell     |
| `herewego-stream`     | Follow lines written to a pipe every `--interval` seconds |
| `herewego-form`       | Fill in a nickname / email / password form (`--echo` for a single echo input) |
| `herewego-echo`       | HTTP server on `/echo`: POST returns the body, GET the URI, as JSON (`--host`, `--port`, default 8080) |
| `herewego-fileserver` | Serve a directory over HTTP (default `/tmp`, `--port` default 99) |
| `herewego-scheduler`  | Run `sh SCRIPT OUTPUT` every day `--at HH:MM` (default 18:20) |
| `herewego-shell`      | Open a shell in a pod through `kubectl exec` after `--delay` seconds |
| `herewego-giftdraw`   | Seeded gift exchange draw among the named people (`--bonus-from` names who offers the extra gift) |

The interactive commands read standard input one line at a time:

- `herewego-select`: type `j` / `k` (or `down` / `up`) to move, `q` to quit,
  an empty line to select.
- `herewego-pager` and `herewego-stream`: type a key name such as `j`, `k`,
  `f`, `b`, `d`, `u`; `q` quits. In `herewego-stream`, `a` and `b` add lines.
- `herewego-form`: each line is typed text, a key name (`tab`, `up`,
  `down`, `backspace`, `ctrl+r`, `esc`), or empty for Enter.
- `herewego-kube`: each line is sent as one order; type the number of an
  entry to go deeper, `q` to go back. `esc` switches to browsing mode, where
  `i` returns to typing and `q` quits.
- `herewego-giftdraw`: one integer seed per line.

## What it does not do

The terminal tools do not read raw keystrokes or redraw the screen in place:
they print the whole view after every input line. There is no mouse support.
The Kubernetes tools talk to the cluster only through the `kubectl`
executable, not through the Kubernetes API. The Redis client has no command
of its own; it is a library class only.