# innex

A handful of small building blocks that depend only on the standard library.

## Installation

```
pip install innex
```

To run the tests, install the test extra with `pip install innex[test]`, then run `pytest`.

## Modules

### `innex.bin_search`

- `bin_search(arr, target)` searches the sorted sequence `arr` and returns the position of an element equal to `target`. It returns `None` if no such element exists.
- `nomore_tar(arr, target)` returns the position of an element equal to `target` as soon as the search meets one. Otherwise it returns the position of the largest element below `target`. It returns `None` when every element is greater than `target`.

```python
from innex.bin_search import bin_search, nomore_tar

bin_search([1, 3, 5, 7], 5)   # 2
bin_search([1, 3, 5, 7], 4)   # None
nomore_tar([0, 10, 20], 15)   # 1
nomore_tar([0, 10, 20], -1)   # None
```

### `innex.group`

`Group` stores items in numbered slots. Every item must have an `id` attribute. An item can be reached by its id (a `str` key) or by its slot number (an `int` key).

- `put(item)` stores a shallow copy of `item`. The copy goes into a freed slot when one is available, and is appended otherwise.
- `submit(item)` does the same as `put`, but only if no stored item already has that id. It returns `True` or `False` to say whether the item was stored.
- `push(item)` appends `item` itself after the last slot.
- `get_by_id(item_id)` and `get_by_index(index)` return a shallow copy of the stored item.
- `take_by_id(item_id)` and `take_by_index(index)` remove the item and return it. If the id is unknown or the slot is not in use, they return a copy of slot 0 and remove nothing.
- `pick()` removes and returns the last item still in use. `pock()` drops the last slot. Both raise `IndexError` on a group that has no slots.
- `free_size()` returns the length of the queue of freed slots. `len(group)` is the number of items in use, and `is_empty()` is true when that number is zero.
- `group[key]` and `group[key] = value` read or replace the stored item in place. An unknown id raises `KeyError`, a slot number out of range raises `IndexError`, and any other key type raises `TypeError`.

```python
from dataclasses import dataclass
from innex.group import Group

@dataclass
class Item:
    id: str
    value: int

group = Group()
group.submit(Item("a", 1))   # True
group.submit(Item("a", 2))   # False
group["a"].value             # 1
group[0].id                  # "a"
group.take_by_id("a")        # Item(id='a', value=1)
len(group)                   # 0
```

### `innex.travel`

- `Content.read_file(path)` reads a UTF-8 text file and appends its lines to `lines`, without their line endings. Each line's starting index goes into `starts`, and `line_at_start` maps that index back to the line number. The running index advances by the UTF-8 byte length of each line. Line breaks are not counted.
- `content[i]` returns the character at offset `i - start` in the line whose start is the last one not after `i`. It raises `IndexError` when that offset is past the end of the line, or when `i` comes before the first line.
- `Travel` holds a `Content` together with `begin`, `end` and `now` positions. `Travel.read_file(path)` loads the file and sets `end` to the last line's start plus the number of lines.
- `TravelMode` is an enum with the members `WORD`, `LINE` and `TOKEN`.

```python
from innex.travel import Content

content = Content()
content.read_file("notes.txt")
content[0]   # first character of the file
```

### `innex.wordtype`

`word_type(ch)` returns `"alpha"` for a letter, `"num"` for a numeric character and `"other"` for anything else. It raises `ValueError` unless it is given exactly one character.

### `innex.hmatrix`

- `HMatrix` holds a 4×4 `matrix`, which is all zeros until it is set. `set_position(x, y, z)` makes it a translation. `set_rot_x`, `set_rot_y` and `set_rot_z` make it a rotation about one axis, with the angle given in radians.
- `Position(x, y, z)` stores a point and builds its translation matrix in `mat`.
- `Rotation(rox, roy, roz)` stores three angles and an `HMatrix` in `mat`. That matrix is all zeros and is not computed from the angles.

```python
from innex.hmatrix import HMatrix, Position

m = HMatrix()
m.set_position(1.0, 2.0, 3.0)
Position(1.0, 2.0, 3.0).mat.matrix[0][3]   # 1.0
```

## What it does not do

- There is no command-line program.
- `Travel` records a range and a current position, but it has no methods that move through the text. `TravelMode` is not used by anything.
- The matrices are not combined with each other. No rotation is applied to a `Position`, and no matrix is built from a `Rotation`'s angles.