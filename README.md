# learnkit

A handful of small, self-contained tools. Each one can be run from the command
line and used as a Python library. Only the standard library is needed.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command-line tools

### learnkit-calc

A calculator with two operations.

```
learnkit-calc add 3 5.5      # Result: 8.50
learnkit-calc sqrt 9         # Result:  3
```

Both arguments to `add` may be integers or decimal numbers. The sum is printed
with two decimal places. For `sqrt`, a whole-number result is printed without
a fractional part. A negative argument to `sqrt`, a non-numeric argument or
the wrong number of arguments prints a usage message. With no command, or an
unknown one, the list of commands is shown.

### learnkit-sorter

Sorts a file of integers, one per line.

```
learnkit-sorter -i numbers.txt -o sorted.txt -a qsort
learnkit-sorter -i numbers.txt -o sorted.txt -a bubblesort
```

`-i` defaults to `infile`, `-o` to `outfile` and `-a` to `qsort`. The tool
prints the chosen files and algorithm and how long the sort took. It then
writes the values one per line. If the algorithm name is not `qsort` or
`bubblesort`, the values are written in their original order. The run stops
with an error message and exit status 1 in three cases:

- the input file cannot be opened,
- a line is not an integer,
- the output file cannot be written.

### learnkit-cgss

An interactive casual-game chat server that runs entirely inside one process.

```
learnkit-cgss
```

Commands at the `Enter Command->` prompt:

| Command                           | Effect                                 |
|-----------------------------------|----------------------------------------|
| `login <username> <level> <exp>`  | add a player                           |
| `logout <username>`               | remove a player                        |
| `send <message>`                  | broadcast a message to every player    |
| `list`                            | list the players online                |
| `help`                            | show the command list                  |
| `quit` / `q`                      | leave                                  |

Every player prints each message it receives. A player who logs out is told
that they have left. The shell also stops at the end of input.

### learnkit-mplayer

An interactive music library.

```
learnkit-mplayer
```

| Command                                        | Effect                              |
|------------------------------------------------|-------------------------------------|
| `lib list`                                     | show the library, numbered from 1   |
| `lib add <name> <artist> <source> <type>`      | add an entry                        |
| `lib remove <id>`                              | remove the entry with that number   |
| `play <name>`                                  | play an entry (`mp3` or `wav`)      |
| `q` / `e`                                      | leave                               |

Playback is simulated. It prints its progress in ten steps of a tenth of a
second each. Other types are reported as unsupported.

### learnkit-simplehttp

Sends `HEAD / HTTP/1.0` to a server and prints the raw reply.

```
learnkit-simplehttp localhost:8080
learnkit-simplehttp [::1]:8080
```

## Library use

```python
from learnkit.simplemath import add, sqrt
from learnkit.sorting import bubble_sort, quick_sort

add(3, 5)        # 8
sqrt(9)          # 3   (integer in, integer out, truncated)
sqrt(9.0)        # 3.0
sqrt(-4)         # 0

values = [5, 4, 3, 2, 1]
quick_sort(values)   # values is now [1, 2, 3, 4, 5]
bubble_sort([5, 5, 3, 2, 1])   # returns the sorted list
```

`learnkit.sorter` provides `read_values(path)` and `write_values(values, path)`
for the one-integer-per-line file format. `read_values` raises `OSError` or
`ValueError`.

### Request/response layer

`learnkit.ipc` is an in-process request/response layer:

- Subclass `Server`, implementing `name()` and `handle(method, params)`, which
  returns a `Response(code, body)`.
- Wrap the server in an `IpcServer`.
- Open an `IpcClient` on the `IpcServer` and use `call(method, params)`.

`IpcServer.connect()` returns a `Session`. Its `exchange(raw)` method takes one
JSON-encoded request and returns the JSON-encoded response. After `close()`,
further exchanges raise `RuntimeError`.

### Game server

`learnkit.cg` builds the game server on top of this layer with
`CenterServer`, `CenterClient`, `Player` and `Message`.

- `CenterServer` answers `addPlayer`, `removePlayer`, `listPlayer` and
  `broadcast`.
- `CenterClient` offers `add_player`, `remove_player`, `list_player` and
  `broadcast`. Failures are raised as `CenterError`.
- A `Player` keeps the messages delivered to it in `inbox`.

`learnkit.cgss.start_center_service()` returns a `CenterClient` that is
connected to a new server. `GameShell(client).execute(line)` runs one console
command and returns `False` when the shell should stop.

### Music library

`learnkit.library` provides `MusicEntry` and `MusicManager`. `MusicManager`
supports `len()`, iteration, `get`, `find`, `add` and `remove`:

- `get` raises `IndexError` when the index is out of range.
- `find` raises `LookupError` when no entry has that name.
- `remove` returns `None` when the index is out of range.

`learnkit.mp` provides `play(source, mtype)` together with `MP3Player` and
`WAVPlayer`. `learnkit.mplayer.MusicShell` runs the console commands against a
`MusicManager`.

## What it does not do

- The game server has no network listener. Clients and the server live in the
  same process, and nothing is kept once it exits.
- The music library is held in memory only, and playback does not decode or
  output any audio.
- `learnkit-simplehttp` only sends a fixed HEAD request. It does not parse the
  reply, follow redirects or speak TLS.