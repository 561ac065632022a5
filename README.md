# bsdcompat

Small utilities and data structures familiar from BSD C libraries, as a
Python library: size parsing, printf format checking, block size selection,
error reporting, stream helpers, logical line parsing, a ChaCha20-based
random generator, bit strings, linked lists and balanced trees.

## Installation

```
pip install bsdcompat
```

The only runtime dependency is `cryptography`, used for the ChaCha20
keystream. To run the tests:

```
pip install "bsdcompat[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `bsdcompat.units` | `expand_number`, `dehumanize_number` |
| `bsdcompat.fmtcheck` | `fmtcheck`, `FormatType` |
| `bsdcompat.getbsize` | `getbsize` |
| `bsdcompat.err` | `warnc`, `errc` |
| `bsdcompat.streams` | `fgetln`, `fgetwln`, `fpurge`, `funopen`, `fropen`, `fwopen`, `CookieFile` |
| `bsdcompat.fparseln` | `fparseln`, `ParseFlags` |
| `bsdcompat.arc4random` | `Arc4Random`, `arc4random`, `arc4random_buf`, `arc4random_uniform`, `arc4random_stir`, `arc4random_addrandom` |
| `bsdcompat.bitstring` | `BitString`, `bitstr_size` |
| `bsdcompat.slist` | `SinglyLinkedList`, `SListNode` |
| `bsdcompat.stailq` | `SinglyLinkedTailQueue`, `STailQNode` |
| `bsdcompat.dlist` | `LinkedList`, `ListNode` |
| `bsdcompat.tailq` | `TailQueue`, `TailQNode` |
| `bsdcompat.splay` | `SplayTree` |
| `bsdcompat.rbtree` | `RedBlackTree` |

## Examples

### Sizes with unit suffixes

`expand_number` accepts decimal, octal (`0` prefix) and hexadecimal (`0x`
prefix) numbers followed by an optional `b`, `k`, `m`, `g`, `t`, `p` or `e`
suffix (powers of 1024, either case). It raises `ValueError` for malformed
input and `OverflowError` when the result does not fit in 64 unsigned bits.
`dehumanize_number` also takes a leading minus sign and limits the result to
a signed 64-bit range.

```python
from bsdcompat.units import expand_number, dehumanize_number

expand_number("4k")        # 4096
dehumanize_number("-1M")   # -1048576
```

### Checking format strings

`fmtcheck(f1, f2)` returns `f1` when its conversions take the same argument
kinds as those of `f2`, and `f2` otherwise.

```python
from bsdcompat.fmtcheck import fmtcheck

fmtcheck("%d items", "%d default")   # "%d items"
fmtcheck("%s items", "%d default")   # "%d default"
```

### Block size

`getbsize` reads `BLOCKSIZE` from the mapping given (the process environment
by default) and returns the column header and the block size in bytes.
Unusable settings print a warning on standard error and fall back.

```python
from bsdcompat.getbsize import getbsize

getbsize({"BLOCKSIZE": "1k"})   # ("1K-blocks", 1024)
getbsize({})                    # ("512-blocks", 512)
```

### Warnings and errors with an error code

```python
import errno
from bsdcompat.err import warnc, errc

warnc(errno.ENOENT, "cannot open %s", "settings.conf")
# stderr: "<program>: cannot open settings.conf: No such file or directory"

errc(2, errno.EACCES, "giving up")   # prints like warnc, then raises SystemExit(2)
```

### Streams

`funopen` builds a binary stream (`CookieFile`, an `io.RawIOBase`) whose
reads, writes, seeks and close are handled by callbacks that receive the
given cookie. At least one of the read and write callbacks is required;
`fropen` and `fwopen` are read-only and write-only shortcuts.

```python
import io
from bsdcompat.streams import fropen, fgetln

source = io.BytesIO(b"first\nsecond\n")
stream = io.BufferedReader(fropen(source, lambda cookie, size: cookie.read(size)))
fgetln(stream)   # b"first\n"
fgetln(stream)   # b"second\n"
fgetln(stream)   # None
```

`fgetwln` does the same for text streams. `fpurge` discards unread buffered
input of a file-backed stream, so reading resumes at the position of the
underlying file; streams without a file descriptor raise `OSError` (EBADF).

### Logical lines

`fparseln(stream, delim, flags)` reads one logical line from a text stream:
comments are removed, the newline is dropped and lines ending in the
continuation character are joined. `delim` holds the escape, continuation
and comment characters (default backslash, backslash, `#`). It returns the
line (None at end of file) and the number of physical reads made.

```python
import io
from bsdcompat.fparseln import fparseln, ParseFlags

stream = io.StringIO("key = a \\\n  b # comment\n")
fparseln(stream, None, ParseFlags.NONE)   # ("key = a   b ", 2)
```

`ParseFlags.UNESCESC`, `UNESCCONT`, `UNESCCOMM`, `UNESCREST` and
`UNESCALL` select which escape sequences are removed from the result.

### Random numbers

The module-level functions share one generator; `Arc4Random` instances can
be created with their own entropy source (a callable returning `n` bytes,
`os.urandom` by default). The generator rekeys after each keystream buffer
and reseeds after about 1.6 MB of output or in a forked child.

```python
from bsdcompat.arc4random import arc4random, arc4random_uniform, arc4random_buf

arc4random()              # an integer in [0, 2**32)
arc4random_uniform(6)     # 0 to 5, without modulo bias
arc4random_buf(16)        # 16 random bytes
```

### Bit strings

```python
from bsdcompat.bitstring import BitString, bitstr_size

bits = BitString(20)
bits.nset(3, 9)
bits.test(5)      # True
bits.ffs()        # 3
bits.ffc()        # 0
bitstr_size(20)   # 3
```

### Lists and queues

Each container hands back the node it created, so values can be inserted
next to a node or removed through it. A node can only be used with the
container that holds it; other nodes raise `ValueError`.

```python
from bsdcompat.tailq import TailQueue

queue = TailQueue([1, 2, 4])
node = queue.last()
queue.insert_before(node, 3)
list(queue)        # [1, 2, 3, 4]
queue.remove(queue.first())
list(reversed(queue))   # [4, 3, 2]
```

`SinglyLinkedList` and `SinglyLinkedTailQueue` link forwards only, so
removing an arbitrary node walks from the head; `LinkedList` and
`TailQueue` link both ways. The tail queues also offer `insert_tail`,
`last` and `concat`, and every container has `swap`.

### Ordered trees

`SplayTree` and `RedBlackTree` hold ordered sets of values, ordered by an
optional `key` function. `insert` returns the already stored equal value,
or None when the value was added.

```python
from bsdcompat.rbtree import RedBlackTree

tree = RedBlackTree([5, 1, 9])
tree.min(), tree.max()   # (1, 9)
tree.nfind(6)            # 9
tree.next(5)             # 9
tree.prev(5)             # 1
```

## What it does not do

The package has no helpers for opening a file under an exclusive lock,
closing every file descriptor above a number, zeroing buffers securely, or
encoding and decoding fixed-width big- and little-endian integers. It has no
command-line programs.