# cezedit

A small interactive text editor built on a gap buffer. Documents are saved in
the CEZ container format: a fixed 64-byte header followed by a zlib-compressed
payload, protected by a CRC-32 checksum.

## Installation

```
pip install .
```

## Running the editor

```
cezedit
```

The editor reads menu choices from standard input. It starts with the file
name `documento.cez` and shows a numbered menu:

| Option | Action                                                      |
|--------|-------------------------------------------------------------|
| 1      | Read one line of text (with its newline) and insert it      |
| 2      | Delete the character before the cursor (Backspace)          |
| 3      | Show the current contents and their length in characters    |
| 4      | Save the document to the current file                       |
| 5      | Discard the buffer and load the current file into a new one |
| 6      | Change the current file name                                |
| 0      | Quit                                                        |

Any other number prints `Opción inválida.`; end of input also quits.

Saving writes the text as UTF-8, compressed with zlib, behind a 64-byte
header that records the original size, the compressed size, the CRC-32 of the
payload, the save time and the file name (cut to 27 bytes). When a file is
opened, the header and the checksum are checked before the payload is
decompressed; a damaged or foreign file is reported on standard error and the
buffer stays empty.

## Using the library

The gap buffer on its own:

```python
from cezedit.gapbuffer import GapBuffer

buf = GapBuffer()
buf.insert_text("Hello world")
buf.move_cursor(5)
buf.insert(",")
buf.delete()
print(str(buf), len(buf))   # Hello world 11
```

`insert` takes exactly one character and raises `ValueError` otherwise.
`delete` raises `IndexError` when the cursor is at the start. `move_cursor`
clamps positions past the end of the text and raises `ValueError` for a
negative position.

Building and reading a CEZ container:

```python
import zlib
from cezedit.cezformat import Flags, build_container, split_container

text = b"some text"
blob = build_container(zlib.compress(text), len(text), "notes.cez", 0, Flags.COMPRESSED)
header, payload = split_container(blob)
assert zlib.decompress(payload) == text
```

`parse_header` reads just the header into a `FileHeader`, and
`FileHeader.to_bytes` packs one back into its 64 bytes. `split_container`
raises `InvalidFileError` for data that is not a CEZ file and `ChecksumError`
(a subclass of it) when the payload does not match the stored CRC-32.

Whole files are read and written in 4096-byte blocks with
`cezedit.fileio.read_file` and `cezedit.fileio.write_file`.

The menu loop can also be driven from any pair of text streams with
`cezedit.cli.run_session(infile, outfile)`.

## Limitations

- The menu offers no way to move the cursor, so typed text always goes at the
  end of the document; cursor movement is only available through
  `GapBuffer.move_cursor`.
- The `Flags.RICH_TEXT` bit can be stored in a header, but nothing in the
  package reads or writes rich text.
- Compressed sizes and original sizes are stored as 32-bit values, so
  documents must stay under 4 GiB.

## Running the tests

```
pip install .[test]
pytest
```