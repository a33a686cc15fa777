# communityapps

A catalog of community applets for a small pixel display. Each applet is
described by a `Manifest` that holds its ID, display name, summary,
description, author, source file name and package name. The package also
has the rules that decide whether a manifest is fit for display in the
mobile app, and helpers that derive IDs, file names and package names from
a display name.

## Manifests

`communityapps.manifest.Manifest` is a frozen dataclass with the fields
`id`, `name`, `summary`, `desc`, `author`, `file_name`, `package_name` and
`source` (bytes, empty by default and left out of the repr).

- `Manifest.validate()` runs the checks below on ID, name, summary,
  description, author, file name and package name, in that order. It stops
  at the first failure by raising `ValidationError`, and returns the
  manifest itself when all pass.
- `Manifest.to_dict()` returns every field except `source` as a dict keyed
  by field name.

## Looking up applets

```python
from communityapps.catalog import AppNotFoundError, find_manifest, get_manifests

for app in get_manifests():
    print(app.id, "-", app.name)

clock = find_manifest("fuzzy-clock")
print(clock.to_dict())

try:
    find_manifest("foo-bar-123")
except AppNotFoundError as exc:
    print(exc)  # app manifest does not exist
```

`get_manifests()` returns a fresh list of every applet in a fixed catalogue
order. That list has 72 entries for 71 distinct applets: `countdown-clock`
appears twice. `find_manifest(app_id)` returns the first manifest with that
ID and raises `AppNotFoundError` (a `LookupError`) when there is none.

The applets are also available in alphabetical slices, each through a
`manifests()` function: `communityapps.apps_a_to_c`, `apps_c_to_h`,
`apps_i_to_p`, `apps_p_to_t` and `apps_t_to_w`.

## Deriving names

```python
from communityapps.manifest import generate_file_name, generate_id, generate_package_name

generate_id("Cool App")            # "cool-app"
generate_file_name("Cool App")     # "cool_app.star"
generate_package_name("Cool App")  # "coolapp"
```

- `generate_id` turns underscores into dashes, joins the words with dashes
  and lower-cases the result.
- `generate_file_name` turns dashes into underscores, joins the words with
  underscores, lower-cases the result and appends `.star`.
- `generate_package_name` drops dashes, underscores and whitespace and
  lower-cases the result.

## Validation

Every rule lives in `communityapps.validate`. Each function returns its
argument unchanged when it passes and raises `ValidationError` (a
`ValueError`) with a message explaining what is wrong otherwise:

- `validate_name`: not empty, title case, at most `MAX_NAME_LENGTH` (16)
  bytes in UTF-8.
- `validate_summary`: not empty, at most `MAX_SUMMARY_LENGTH` (27) bytes in
  UTF-8, no trailing `.`, `!` or `?`, first word capitalised.
- `validate_desc`: not empty, ends in `.`, `!` or `?`, first word
  capitalised.
- `validate_author`: not empty.
- `validate_id`: not empty, lower case, only letters, digits and dashes.
- `validate_file_name`: not empty, ends in `.star`; the rest is lower case
  and only letters, digits and underscores.
- `validate_package_name`: not empty, lower case, only letters and digits.

```python
from communityapps.validate import ValidationError, validate_name

try:
    validate_name("cool app")
except ValidationError as exc:
    print(exc)  # 'cool app' should be title case, 'Fuzzy Clock' for example
```

## What this package does not do

- The manifests in the catalog carry no applet scripts: `source` is empty
  for every one of them, and nothing here loads or runs an applet.
- There is no command-line tool. Creating, removing or listing applets on
  disk, and writing new applet files from templates, are not part of the
  package.

## Tests

The tests use pytest, which the `test` extra installs.