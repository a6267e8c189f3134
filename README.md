# katas

A collection of small, self-contained programming exercises: a deck of
cards, bots and shapes behind common interfaces, stream copying, a
file-backed password vault, and a set of classic searching, sorting,
recursion and array puzzles. It has no dependencies outside the standard
library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

| Command            | What it does                                                                 |
|--------------------|------------------------------------------------------------------------------|
| `katas-deck`       | Builds a 16-card deck, shuffles it and prints each card with its position.    |
| `katas-greetings`  | Prints greetings from two bots and the areas of a triangle and a square.      |
| `katas-basics`     | Prints an updated car map, the parity of 1 to 9 and a person's first name.    |
| `katas-streams`    | Echoes a file, or the body of an `http://` / `https://` address, to the screen.|
| `katas-vault`      | Interactive menu on standard input to create, sign in to, update and read a vault. |

Examples:

```
katas-deck
katas-streams notes.txt
katas-vault
```

`katas-streams` prints each chunk of a file as text followed by its byte
values; for a web address it prints each chunk followed by its length.
Without an argument it prints a usage line and exits with status 2.

`katas-vault` shows a numbered menu. Entering `1`–`4` picks an action; any
other number, or anything that is not a number, quits.

## Library use

Card deck (`katas.deck`):

```python
import random
from katas.deck import new_deck, deal, new_deck_from_file, greeting_bytes

cards = new_deck()                 # "Ace of Hearts", "Two of Hearts", ...
hand, rest = deal(cards, 5)        # ValueError if the hand size is out of range
cards.shuffle(random.Random(1))    # in place; the generator is optional
cards.save_to_file("my_cards")     # comma separated text
loaded = new_deck_from_file("my_cards")
greeting_bytes("Hi")               # [72, 105]
```

Interfaces (`katas.greetings`, `katas.basics`):

```python
from katas.greetings import EnglishBot, SpanishBot, Triangle, Square, print_area
from katas.basics import Person, ContactInfo, modify_map, classify_parity

EnglishBot().greeting()            # "Hi there!"
Triangle(height=10, base=10).area()  # 50.0
print_area(Square(side_length=10))   # prints "Area of Square is : 100"
modify_map({"bmw": "M3", "audi": "a6"})  # {"bmw": "M4", "audi": "a6"}
classify_parity([1, 2])            # [(1, "odd"), (2, "even")]
```

Streams (`katas.streams`): `copy_stream`, `copy_file` and `fetch` feed bytes
in chunks to any object with a `write(data)` method and return the number of
bytes copied; `EchoWriter` and `LogWriter` print what they receive.

Password vault (`katas.vault`):

```python
from katas.vault import create_vault, sign_in, add_password, fetch_password, VaultError

password = "password"
create_vault("demo", password, password)   # writes the file ./demo
sign_in("demo", password)                  # "demo", or VaultError
add_password("demo", "secret")
fetch_password("demo")                     # "secret"
```

Searching and sorting:

```python
from katas.searching import binary_search, ceiling, floor, first_last, search_in_2d
from katas.sorting import insertion_sort, selection_sort, merge_sort, merge_sort_in_place

ceiling([2, 3, 5, 6, 7, 9, 14, 16, 18], 15)   # 16
floor([2, 3, 5, 6, 7, 9, 14, 16, 18], 15)     # 14
merge_sort([8, 3, 4, 12, 5, 6])                # [3, 4, 5, 6, 8, 12]
```

Cyclic-sort puzzles:

```python
from katas.cyclic import missing_number, missing_positive, find_duplicate

missing_positive([1, 8, 7, 9, -1, 0, 2])       # 3
```

Recursion:

```python
from katas.recursion import sum_of_digits, reverse_number, find_all

find_all([1, 2, 3, 2, 4, 2, 5], 2, 0)          # [1, 3, 5]
```

Array problems:

```python
from katas.leetcode import max_area_two_pointer, three_sum, maximum_swap

max_area_two_pointer([1, 8, 6, 2, 5, 4, 8, 3, 7])  # 49
three_sum([-1, 0, 1, 2, -1, -4])                   # [[-1, -1, 2], [-1, 0, 1]]
maximum_swap(2736)                                 # 7236
```

## Modules

- `katas.deck` – card deck building, dealing, saving, loading and shuffling
- `katas.greetings` – bots with greetings and shapes with areas
- `katas.basics` – maps, parity and a simple person record
- `katas.streams` – copying streams, files and web addresses into writers
- `katas.vault` – a JSON file holding a named vault and one password
- `katas.searching` – binary search, ceiling, floor, first/last, 2-D search
- `katas.sorting` – insertion, selection, cyclic and merge sorts
- `katas.cyclic` – duplicate and missing-number puzzles
- `katas.recursion` – palindromes, digit sums, reversal, index finding
- `katas.leetcode` – water container, k-sum, combination sum, subarrays, path sums, swaps

## What it does not do

- The vault is not a secure password store. It keeps exactly one password,
  in plain text, in a JSON file named after the vault in the current
  directory. `add_password` replaces that password, so the vault's master
  password changes with it. Nothing is encrypted or hashed.
- The commands are fixed demonstrations; apart from `katas-streams` (one
  file or address) and the `katas-vault` menu they take no input or options.