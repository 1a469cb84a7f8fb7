# tinyunix

A small collection of classic Unix userland tools and the data layouts
they sit on, written in plain Python with no third-party dependencies.

It includes:

- **grep** (`tinyunix.grep`): a line filter with a tiny
  regular-expression matcher that understands only `^`, `.`, `*` and `$`.
- **wc** (`tinyunix.wc`): line, word and character counts.
- **ed** (`tinyunix.ed`): a minimal interactive line editor (append,
  print, delete, read, write).
- **shell** (`tinyunix.shell`): a tokenizer and parser for a small shell
  grammar with pipes `|`, lists `;`, background jobs `&`, grouping
  `( )` and redirections `<`, `>`, `>>`.
- **fmt** (`tinyunix.fmt`): a `printf` that understands `%d`, `%u`,
  `%x`, `%p`, `%c`, `%s` and `%%`, with `l` / `ll` length prefixes.
- **ulib** (`tinyunix.ulib`): `atoi`, `strcmp` and a line reader `gets`.
- **umalloc** (`tinyunix.umalloc`): a first-fit free-list allocator over
  a simulated heap that grows with `sbrk`.
- **rand** (`tinyunix.rand`): the Park–Miller "minimal standard"
  pseudo-random generator.
- **tools** (`tinyunix.tools`): `cat`, `echo`, `ls`, `mkdir`, `rm`,
  `ln`, `touch`, `kill` and `clear` as functions.
- **layout**, **elf**, **virtio**: page-table arithmetic, memory-map
  addresses, open flags, file types, and binary packing and parsing of
  ELF headers and virtio records.

## Installation

```
pip install tinyunix
```

Python 3.10 or later is required.

## Command-line use

Three commands are installed:

```
tinyunix-grep PATTERN [FILE ...]
tinyunix-wc [FILE ...]
tinyunix-ed [FILE]
```

With no files, `tinyunix-grep` and `tinyunix-wc` read standard input.
`tinyunix-grep` prints only lines that end in a newline.

```
$ printf 'apple\nbanana\ncherry\n' | tinyunix-grep 'an.*a$'
banana
$ printf 'one two\nthree\n' | tinyunix-wc
2 3 14 
```

`tinyunix-ed` is interactive and holds at most 100 lines. At its `> `
prompt, type `a` to append lines (finish with a line holding a single
`.`), `p` to print them, `d` to delete one, `r` to read a file, `w` to
write, `h` for help and `q` (or end of input) to quit. Writing does not
truncate the file first, so a longer earlier content keeps its tail.

## Library use

### Pattern matching

```python
from tinyunix.grep import match

match("^ab*c$", "abbbc")   # True
match("x.z", "wxyz")       # True: matches anywhere in the text
match("^x", "axb")         # False
```

### printf-style formatting

```python
from tinyunix.fmt import format_printf

format_printf("%d items, %x hex, %s\n", 3, 255, "done")
# '3 items, FF hex, done\n'
```

Integer conversions work on 32-bit values, hexadecimal digits are upper
case, `%p` prints sixteen hex digits after `0x`, `%s` of `None` gives
`(null)`, and unknown conversions are echoed back with their `%`.
`fprintf(stream, fmt, ...)` and `printf(fmt, ...)` write the result.

### Parsing shell command lines

```python
from tinyunix.shell import parse_cmd, tokenize, PipeCmd, ShellSyntaxError

tree = parse_cmd("cat < in.txt | grep foo > out.txt")
isinstance(tree, PipeCmd)   # True

tokenize("ls >> log")       # [('a', 'ls'), ('+', '>>'), ('a', 'log')]

try:
    parse_cmd("echo )")
except ShellSyntaxError as exc:
    print("bad command:", exc, exc.leftover)
```

The parse tree is built from `ExecCmd`, `RedirCmd`, `PipeCmd`,
`ListCmd` and `BackCmd`. A command takes fewer than ten words.

### Counting

```python
from tinyunix.wc import count

count(b"hello world\n")   # Counts(lines=1, words=2, chars=12)
```

### Small C-library helpers

```python
from tinyunix.ulib import atoi, strcmp

atoi("-42")          # -42
atoi("17abc")        # 17
strcmp("abc", "abd") # -1
```

### The allocator

```python
from tinyunix.umalloc import Allocator

heap = Allocator(heap_limit=1 << 20)
a = heap.malloc(100)
b = heap.malloc(200)
heap.free(a)
```

Addresses are plain integers in a simulated heap. Freed blocks are
coalesced with their neighbours, and the heap grows through `sbrk` in
chunks of at least 4096 sixteen-byte units. Going past `heap_limit`
raises `MemoryError`; freeing an address that is not allocated raises
`ValueError`.

### Pseudo-random numbers

```python
from tinyunix.rand import Random, do_rand

rng = Random(1)
values = [rng.rand() for _ in range(3)]
```

### Command functions

Each function in `tinyunix.tools` takes a list of arguments (or reads
`sys.argv` when given none) and returns an exit status:

```python
from tinyunix.tools import echo, fmtname

echo(["hello", "world"])   # prints "hello world"
fmtname("dir/file")        # 'file          '
```

`ls` prints name, type, inode number and size for each entry; `kill`
sends a kill signal to each pid given; `clear` writes the ANSI
clear-screen sequence.

### Binary formats

```python
from tinyunix.elf import parse_elf_header, ElfHeader, ElfFormatError
from tinyunix.layout import pgroundup, px, OpenFlag

pgroundup(4097)                   # 8192
OpenFlag.CREATE | OpenFlag.WRONLY # flags for creating a file to write
parse_elf_header(ElfHeader().pack()).magic == 0x464C457F  # True
```

`parse_elf_header` raises `ElfFormatError` when the data is too short
or does not start with the ELF magic number. `tinyunix.virtio` packs
and unpacks `VirtqDesc`, `VirtqUsedElem` and `VirtioBlkReq`.

## What this package does not do

- The shell module only parses command lines; it does not run commands,
  open redirection files or build pipes.
- There is no kernel, file system or disk: the layout, ELF and virtio
  modules describe data formats and addresses only, and the command
  functions work on the host's own files and processes.

## Running the tests

```
pip install "tinyunix[test]"
pytest
```