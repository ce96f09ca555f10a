# hivecmap

Helpers for preparing vector map data for tiling, plus a few small,
dependency-free web utilities. The package needs only the standard library.

## Modules

- `hivecmap.projection`: `lonlat_to_mercator` projects longitude/latitude
  degrees to Web Mercator metres; `segment_bounds` and `bounding_box` return
  `(x_min, y_min, x_max, y_max)` tuples (`bounding_box` raises `ValueError`
  for no points); `segment_orientation` classifies a segment as `"0"`
  (rising or flat), `"1"` (falling) or `None` when a coordinate is NaN.
- `hivecmap.shapepaths`: `shapefile_paths` joins each name of a
  `|`-separated list onto a directory, `count_shapefiles` counts them,
  `last_component` returns the text after the last `/`, and `index_path`
  appends a directory's last component to an output prefix.
- `hivecmap.quadcode`: `code_to_str` renders a quad code as base-4 digits,
  lowest two bits first; `nearly_equal` compares floats with a relative
  tolerance; `pow2` squares a number.
- `hivecmap.web.sha1`: `Sha1`, an incremental SHA-1 hasher with `update`,
  `copy`, `reset`, `digest_words`, `digest` and `hexdigest`; taking a digest
  does not disturb the running state.
- `hivecmap.web.cookies`: `parse_cookie_header` and `CookieJar`, which reads
  a request's Cookie header (raising `CookieError` when more than one is
  given) and produces Set-Cookie header values.
- `hivecmap.web.querystring`: `QueryString` with `get`, `get_list`
  (`name[]=value`), `get_dict` (`name[key]=value`), `pairs` and `clear`;
  also `decode_value`, `split_pairs`, `key_matches` and `scan_value`.
- `hivecmap.web.mustache_parse` and `hivecmap.web.mustache`: a Mustache
  template engine with sections, inverted sections, partials, comments,
  unescaped tags and delimiter changes. Templates are rendered against
  plain dicts, lists, strings, numbers, booleans and `None`. Partials are
  loaded through `load`, which reads from a base directory (`templates` by
  default, changed with `set_base`) or through a function given to
  `set_loader`. Malformed templates raise `TemplateError`.

## Examples

```python
from hivecmap.projection import lonlat_to_mercator, bounding_box
from hivecmap.shapepaths import shapefile_paths

x, y = lonlat_to_mercator(116.39, 39.91)
box = bounding_box([(0.0, 0.0), (10.0, 5.0), (-3.0, 2.0)])  # (-3.0, 0.0, 10.0, 5.0)

shapefile_paths("data/roads", "a.shp|b.shp")  # ['data/roads/a.shp', 'data/roads/b.shp']
```

```python
from hivecmap.web.sha1 import Sha1
from hivecmap.web.mustache import compile_template
from hivecmap.web.querystring import QueryString
from hivecmap.web.cookies import parse_cookie_header

Sha1(b"abc").hexdigest()  # 'a9993e364706816aba3e25717850c26c9cd0d89d'

compile_template("Hello {{name}}!").render({"name": "map"})  # 'Hello map!'

QueryString("/tiles?z=3&x=4&y=2").get("z")  # '3'

parse_cookie_header('session="token"; theme=dark')  # {'session': 'token', 'theme': 'dark'}
```

## What the package does not do

It does not build, write or read spatial index files, does not read
shapefiles, does not cache tiles in any store, and has no HTTP server and
no command-line program. It provides the helper functions above for a
program that does those things.

## Tests

```
pip install -e .[test]
pytest
```