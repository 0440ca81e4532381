# fastatools

Command-line tools for FASTA sequences, and a small lister for a
directory tree of tests.

## Installation

    pip install .

Running the tests needs the `test` extra:

    pip install ".[test]"
    pytest

## fastatools

Reads FASTA from standard input and writes the result to standard output.

    fastatools -h            # show usage
    fastatools 1 < in.fasta  # DNA sequences, upper-cased and cleaned
    fastatools 2 < in.fasta  # RNA sequences (T becomes U)
    fastatools 3 < in.fasta  # reverse complement

Header lines (starting with `>`) are printed on a line of their own. The
line right after a header is always treated as sequence. Sequence lines
are cleaned: ASCII lower-case letters become upper case, and spaces, `R`,
`D`, `=` and `'` are removed. The cleaned lines are written one after
another with no line breaks between them. When a new record starts after
one that had sequence data, a blank line separates them.

Options `4` and `5` are accepted but read nothing and print nothing. Any
argument beginning with `-h` prints the usage. With no option, with two
arguments, or with any other option, the command prints `invalid argument`
and exits with status 84.

From Python:

    from fastatools.sequence import to_dna, to_rna, to_reverse_complement

    print(to_dna([">seq1", "acgt tt"]))

`fastatools.sequence` also provides `clean_sequence(line)` and
`complement(base)`. `fastatools.cli.run_option(option, lines)` returns the
rendered text for an option and raises `fastatools.cli.InvalidArgument` for
an unknown one; `fastatools.cli.usage()` returns the help text.

`fastatools.textutil` holds small string helpers: `prefix_equal`,
`split_path_words` and `capitalize_words`.

## projtester

Lists a directory tree of tests.

    projtester -h              # show usage
    projtester tests_root      # indented tree of the directory
    projtester tests_root echo # tree in bracketed form
    projtester tests_root cat  # fixed sample report

With only a directory, it first prints `rootDirectory1`, `rootDirectory2`
or `rootDirectory3` for each digit `1`, `2` or `3` in the path, then the
tree: every entry in name order, prefixed by five dashes per level.
Directories whose names start with `.` are skipped. The tree is printed
once for each word of the path (words are separated by `/`, `.` and
spaces).

With `echo`, each file gives a line `name :(null)`, and each directory
name is written in brackets in front of the line that follows it.

With `cat`, it prints a fixed one-test report. Any other second argument
prints nothing and exits with status 0.

If the directory cannot be opened, the command exits with status 84. If no
argument is given, it prints `ERROR: binary not found` and exits with
status 84.

From Python, `fastatools.projtester` provides `usage`, `title`,
`tree_lines`, `echo_lines`, `cat_report`, `backup_report` (a fixed sample
report) and `run_ps` (runs `/bin/ps` and returns its exit status).

## What it does not do

`projtester` does not run the binary it is given, compare any output, or
write to an output file, even though its usage text mentions one: its
reports are the directory listings and fixed texts described above.