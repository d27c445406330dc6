# rdfsnips

Small command-line filters for RDF text files (Turtle, N-Triples,
N-Quads). None of them parse RDF fully. The Turtle tools scan the text
only far enough to find where statements end. A statement ends at a `.`
that is outside an `<IRI>`, a `"string"` or `"""long string"""` literal,
and a `#` comment. The line tools treat each input line as a unit.

There are no dependencies beyond the Python standard library (3.10 or
later).

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Commands

Every command reads standard input when no file is given.

### `ttl-split`

```
ttl-split [-n N] [-p PREFIX] [FILE...]
```

Splits Turtle text into files of `N` statements each. The default for `N`
is 1000, and `N` may be given in decimal, octal (`0…`) or hex (`0x…`).
The files are named `PREFIX` plus a four-digit counter: `x0000`, `x0001`,
and so on, with `x` as the default prefix. Statements that begin with `@`
(such as `@prefix`) are directives. They are written where they occur and
do not count towards `N`. The directives seen so far in the current input
are also repeated at the top of every new file, so each file can be read
on its own. The file counter carries on from one input file to the next,
but the directives are forgotten between input files. A file that cannot
be read is skipped, and the exit status counts such failures.

### `ttl-wc`

```
ttl-wc [--subjects | --predicates | --statements] [FILE...]
```

Counts subjects, predicates and objects, in the manner of `wc`:

- every statement adds one subject, one predicate and one object;
- every `;` adds one more predicate and object;
- every `,` adds one more object.

Directives are not counted. By default each line shows the three counts
right-aligned, followed by a tab and the file name. `--subjects`,
`--predicates` and `--statements` each print a single number. With
`--statements` that number is the object count. When more than one file is
given, a `total` line follows. A file that cannot be read repeats the
counts of the file before it, and the exit status is non-zero.

### `ttl-prefixify`

```
ttl-prefixify [FILE...]
```

Rewrites full IRIs such as `<http://xmlns.com/foaf/0.1/name>` into
prefixed names (`foaf:name`). The known prefixes are a built-in set
(`foaf`, `ldp`, `owl`, `rdf`) plus the `@prefix` declarations found in
the input. If an IRI matches more than one namespace, the first match in
that order is used. The output begins with `@prefix` lines for the
built-in set. A declaration of a prefix name that is already known is
dropped. Every other statement is written after a blank line. An
incomplete statement at the end of the input is lost. The result goes to
standard output.

### `hashl`

```
hashl [FILE...]
```

For each input line, prints the 128-bit MurmurHash3 (x64 variant, seed 0)
of the line without its trailing newline. The hash is written as 32 hex
digits, and within each byte the low nibble comes first. This gives a
quick fingerprint of each statement in an N-Quads file. A file that
cannot be opened is reported on standard error, and the exit status
is 1.

### `unqpc`

```
unqpc [--only-printable] [--recursive] [FILE...]
```

Decodes percent escapes (`%20`, `%C3%A9`, ...) in each line. Each line is
written out with a newline.

- `--only-printable` leaves escapes below `%20` alone. A line is decoded
  only if it holds at least one such escape other than `%FE` or `%FF`
  (`%fe`, `%ff`).
- `--recursive` decodes again and again until no escapes are left.

A file that cannot be opened is reported on standard error, and the exit
status is 1.

## Library use

- `rdfsnips.scanner.iter_statements(text)` yields the complete statements
  of a Turtle text. `rdfsnips.scanner.iter_events(text, marks)` also
  reports the extra mark characters it finds outside IRIs, literals and
  comments.
- `rdfsnips.murmur.murmur3_x64_128(data)` returns the 16-byte digest.
  `rdfsnips.murmur.hex_digest(data)` returns the same digest as the hex
  string that `hashl` prints.
- `rdfsnips.hashl.line_hash(line)` hashes one line, and
  `rdfsnips.hashl.hash_lines(stream)` hashes every line of a stream.
- `rdfsnips.unqpc.has_percent`, `unquote`, `unquote_line` and
  `unquote_lines` detect and decode percent escapes in bytes.
- `rdfsnips.ttl_split.TurtleSplitter(prefix, statements_per_file)` can be
  used as a context manager. It has `feed(statement)` and `close()`, and
  lists the files it wrote in `files`.
  `rdfsnips.ttl_split.split_text(text, splitter)` feeds a whole text to a
  splitter.
- `rdfsnips.ttl_wc.count_text(text, only_subjects)` returns a `Counts`
  (`subjects`, `predicates`, `objects`; counts can be added together), and
  `rdfsnips.ttl_wc.format_counts(counts, name, field)` renders one output
  line.
- `rdfsnips.ttl_prefixify.PrefixTable` has `add(directive)`,
  `substitute(statement)` and `header()`.
  `rdfsnips.ttl_prefixify.prefixify_text(text)` rewrites a whole text.

## What it does not do

The package does not validate, parse or convert RDF. Malformed input is
split or counted as well as the lexical scan allows. There is no tool
here for hashing whole files or for reifying statements into
`rdf:Statement` resources.