# tola

Core pieces of a static site generator for blogs written in Typst:
working out where each page and asset ends up in the output tree, reading
the `<tola-meta>` metadata a page carries, copying assets only when they are
out of date, tracking which content files depend on which templates, and
parsing the command line.

Everything here is plain Python with no third-party dependencies.

## Modules

| Module | What it holds |
|--------|---------------|
| `tola.deps` | `DependencyGraph` and the shared `DEPENDENCY_GRAPH` instance |
| `tola.files` | `collect_all_files`, `is_up_to_date`, `IGNORED_FILES` |
| `tola.elements` | Summary elements and their HTML, `ContentMeta`, `html_escape`, `MetadataError` |
| `tola.meta` | `PageMeta`, `PagePaths`, `Pages`, `AssetMeta`, `AssetPaths`, `url_from_output_path`, `days_to_ymd`, `TOLA_META_LABEL` |
| `tola.assets` | `process_asset`, `process_rel_asset` |
| `tola.cli` | `build_parser`, `parse_args`, `Cli`, `BuildArgs`, `CommandKind` |

## Dependency tracking

```python
from tola.deps import DependencyGraph

graph = DependencyGraph()
graph.record_dependencies("content/index.typ", ["templates/base.typ"])
graph.get_dependents("templates/base.typ")   # frozenset({Path("content/index.typ")})

# Recording again replaces the old dependencies of that file.
graph.record_dependencies("content/index.typ", ["templates/new.typ"])
graph.get_dependents("templates/base.typ")   # None
```

A file never counts as its own dependency. `get_dependents` returns `None`
when nothing depends on the given file, and `clear` forgets everything. All
operations are guarded by a lock, so one graph can be shared between threads.

## Files

`collect_all_files(directory)` returns every regular file below a directory,
in sorted order, without following symbolic links and skipping `.DS_Store`.
A missing directory gives an empty list.

`is_up_to_date(src, dst, deps_mtime=None)` is true when `dst` is at least as
new as `src` and, if given, as the dependency time `deps_mtime` (seconds since
the epoch). A file that cannot be inspected makes the result false.

## Page metadata

Pages declare metadata with `#metadata(...) <tola-meta>`. The queried JSON is
read into a `ContentMeta` with the fields `title`, `summary`, `date`,
`update`, `author`, `draft` (default `False`) and `tags` (default empty).
Unknown keys are ignored. The `summary` may be a plain string, which is
HTML-escaped, or a tree of elements, which is rendered to HTML.

```python
from tola.elements import ContentMeta, parse_element, html_escape

meta = ContentMeta.from_json('{"title": "Post", "summary": {"func": "text", "text": "Hi"}}')
meta.title      # "Post"
meta.summary    # "Hi"
meta.draft      # False

parse_element({"func": "strike", "text": "gone"}).to_html()   # "<s>gone</s>"
html_escape("<script>")                                       # "&lt;script&gt;"
```

Element kinds, selected by the `func` key:

| `func` | Class | HTML |
|--------|-------|------|
| `space` | `Space` | a space |
| `linebreak` | `Linebreak` | `<br/>` |
| `text` | `Text` | escaped text |
| `strike` | `Strike` | `<s>text</s>` |
| `link` | `Link` | `<a href="dest">body</a>` |
| `sequence` | `Sequence` | children joined |
| anything else | `Unknown` | empty string |

Malformed metadata or elements raise `MetadataError` (a `ValueError`).

## Paths and URLs

```python
from tola.meta import days_to_ymd, url_from_output_path

days_to_ymd(0)                                                  # (1970, 1, 1)
url_from_output_path("public/posts/a/index.html", "public")     # "/posts/a/index.html"
```

`url_from_output_path` raises `ValueError` for a path outside the output root.

`PageMeta` holds a page's `PagePaths` (`source`, `html`, `relative`,
`url_path`, `full_url`), its `lastmod` time, its `content_meta` and any
`compiled_html`. `with_content` returns a copy carrying the given metadata,
or `None` when that metadata marks a draft. `lastmod_ymd` gives the
modification date as `YYYY-MM-DD`. `Pages` wraps a list of pages and is
iterable and has a length.

`AssetMeta.from_source(source, assets_dir, output_dir, output_root)` resolves
an asset to its destination and URL, raising `ValueError` if the file is not
in the assets directory.

## Assets

```python
from tola.assets import process_asset, process_rel_asset

process_asset("assets/css/site.css", "assets", "public", "public")
process_rel_asset("content/posts/photo.png", "content", "public")
```

Both create the destination directory and copy the file, and return `True`
when they copied. Unless `clean=True`, a destination that is already up to
date is left alone and `False` is returned.

## Command-line arguments

`tola.cli.parse_args(argv)` parses the `init`, `build`, `serve` and `deploy`
subcommands (aliases `i`, `b`, `s`, `d`) together with the global options
`-o/--output`, `-c/--content`, `-a/--assets` and `-C/--config` (default
`tola.toml`) into a `Cli` object. `build` and `serve` take `--clean`,
`-m/--minify`, `-t/--tailwind`, `--rss`, `--sitemap` and `--base-url`,
collected in a `BuildArgs`; `serve` also takes `-i/--interface`,
`-p/--port` and `-w/--watch`; `deploy` takes `-f/--force`; `init` takes an
optional site name. The switch options may be given bare (true) or followed
by `true` or `false`. With no arguments, help is printed and `SystemExit(2)`
is raised.

```python
from tola.cli import parse_args

cli = parse_args(["build", "--minify"])
cli.is_build()            # True
cli.build_args.minify     # True
```

## What this package does not do

It does not compile Typst documents, run a full site build, generate RSS
feeds or sitemaps, serve the site, watch for changes or deploy. The command
line is parsed into a `Cli` object, but no command is carried out and no
console script is installed.

## Tests

The test suite uses pytest and lives in `tests/`:

```
pip install -e ".[test]"
pytest
```