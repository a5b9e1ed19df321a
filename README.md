# tddkata

A collection of small, well-tested exercises: each module solves one
self-contained problem. It needs nothing beyond the Python standard library.

## Installation

```
pip install .
pip install ".[test]"   # with pytest and hypothesis
```

## What is inside

| Module | What it does |
| --- | --- |
| `tddkata.hello` | `hello(name, language)` greets in English, `"Spanish"` or `"French"`; an empty name becomes `"World"` |
| `tddkata.greet` | `greet(writer, name)` writes `Hello, <name>` to a stream |
| `tddkata.adder` | `add(x, y)` |
| `tddkata.iterations` | `repeat(char, times)`; a count of zero or less gives `""` |
| `tddkata.functional` | `reduce(collection, fn, initial)`, `find(collection, predicate)` (first match or `None`), `mapped(collection, fn)` |
| `tddkata.sums` | `sum_of(numbers)`, `sum_all(*lists)`, `sum_all_tails(*lists)` (an empty list's tail sums to 0) |
| `tddkata.bank` | frozen `Account` and `Transaction` dataclasses, `new_transaction`, `new_balance_for` |
| `tddkata.shapes` | `Shape` base class; `Rectangle`, `Circle`, `Triangle` with `area()`, and `perimeter()` for rectangles and circles; circle and triangle results are rounded to two decimals |
| `tddkata.wallet` | `Wallet` with `deposit`, `withdraw` and `balance()`, holding `Bitcoin` (prints as `10 BTC`); overdrawing raises `InsufficientFundsError` |
| `tddkata.dictionary` | `Dictionary` with `search`, `add`, `update`, `delete`, raising `WordNotFoundError`, `WordExistsError` or `WordDoesNotExistError` (all `DictionaryError`, a `LookupError`) |
| `tddkata.counter` | `Counter` with a lock-protected `inc()` and `value()` |
| `tddkata.stack` | generic `Stack` with `push`, `pop` (raises `IndexError` when empty) and `is_empty` |
| `tddkata.roman` | `Roman` (1–3999, else `ValueError`), `RomanNumeral`, `convert_to_roman`, `convert_to_arabic` |
| `tddkata.clockface` | `Point` and the angles and unit vectors of the second, minute and hour hands for a `datetime` or `time` |
| `tddkata.svg` | `svg_writer(writer, t)` draws the clock face as SVG; `make_hand(point, length)` places a hand |
| `tddkata.walk` | `walk(value, fn)` calls `fn` on every string in dataclasses, lists, tuples, mapping values, iterators and the results of zero-argument callables |
| `tddkata.concurrency` | `check_websites(checker, urls)` runs a checker on every URL in a thread pool and returns a dict |
| `tddkata.racer` | `racer(url1, url2)` returns whichever URL answers first within 10 seconds; `configurable_racer(url1, url2, timeout)` takes seconds or a `timedelta` and raises `RacerTimeoutError` |
| `tddkata.countdown` | `countdown(writer, sleeper)` writes 3, 2, 1 and `Go!`, sleeping after each number; `Sleeper`, `ConfigurableSleeper` |
| `tddkata.contexts` | `Store` base class; `server(store)` returns a handler `handle(writer, cancelled=None)` that writes the store's data, or logs and writes nothing if the fetch fails |
| `tddkata.blogposts` | `Post` (with `sanitised_title()`), `new_post(lines)`, `posts_from_directory(directory)` |

## Examples

```python
import io
from tddkata.hello import hello
from tddkata.roman import Roman, convert_to_roman, convert_to_arabic
from tddkata.blogposts import new_post

hello("Elodie", "Spanish")        # 'Hola, Elodie'
convert_to_roman(1984)            # 'MCMLXXXIV'
str(Roman(2014))                  # 'MMXIV'
convert_to_arabic("MMXIV")        # 2014

post = new_post(io.StringIO("Title: Post 1\nDescription: D\nTags: tdd, go\n---\nHello\nWorld"))
post.tags                         # ['tdd', 'go']
post.body                         # 'Hello\nWorld'
```

## Commands

```
tddkata-greet                  # prints "Hello, Elodie", then serves it over HTTP on port 8080
tddkata-clockface > clock.svg  # draws the current time as an SVG clock
tddkata-countdown              # counts 3, 2, 1, Go! a second apart
tddkata-blogposts [DIRECTORY]  # reads posts from DIRECTORY (default ./posts) and prints them
```

A post file looks like this:

```
Title: Post 1
Description: Description 1
Tags: tdd, go
---
Hello
World
```

`posts_from_directory` reads every file in the directory in name order; an
unreadable directory or file raises `OSError`, which `tddkata-blogposts`
reports on standard error before exiting with status 1.

## What it does not do

Blog posts are only parsed into `Post` objects and printed. There is no
HTML rendering of posts, no index page, and no web server for a blog.

## Running the tests

```
pytest
```