# tinyapps

Three small applications written as plain Python objects. Each object holds
the state and behaviour of its app; none of them draws anything on screen.

## To-do list (`tinyapps.todo`)

A `TodoList` holds `Task` objects in the order they were added.

- `TodoList.add_task(name)` appends a new task and returns it.
- `TodoList.remove_task(task)` removes it; a task that is not in the list
  raises `ValueError`.
- `Task.rename(name)` gives a task a new name.
- `Task.set_completed(completed)` ticks a task off or back on.

Empty names are refused with `ValueError`, both when adding and when
renaming.

The list keeps a running status:

- `TodoList.completed_count()`: the number of completed tasks
- `TodoList.todo_count()`: the number still to do
- `TodoList.status_text()`: a line such as `Status: 2 todo / 1 completed`

A `TodoList` can also be iterated, measured with `len()`, and read as a
tuple through its `tasks` property.

## System load (`tinyapps.sysinfo`, `tinyapps.charts`)

`SysInfo.instance()` returns the shared system-information object for the
running platform: `LinuxSysInfo`, `MacSysInfo` or `WindowsSysInfo`. On any
other platform it raises `RuntimeError`. Call `init()` once to take a first
CPU sample; after that:

- `cpu_load_average()` gives the CPU load, in percent, since the previous
  sample (calling it before `init()` raises `RuntimeError`)
- `memory_used()` gives the share of memory in use, in percent; on Linux it
  counts swap as well as RAM, on Windows physical memory only

Both values are kept within 0 to 100. `LinuxSysInfo` reads `/proc/stat`
(another path can be passed to its constructor); memory figures and the
other platforms' CPU times come from `psutil`.

The calculations are also available on their own:

- `parse_proc_stat(line)` returns `(user, nice, system, idle)` from the
  aggregate `cpu` line of `/proc/stat`, raising `ValueError` for anything else
- `busy_percent(first, second)` turns two `(user, nice, system, idle)`
  samples into a load figure
- `windows_busy_percent(first, second)` does the same for
  `(idle, kernel, user)` samples, where kernel time includes idle time
- `used_percent(used, total)` turns two byte counts into a percentage
  (0 when `total` is not positive)

`CpuChart` and `MemoryChart` hold chart data. Each takes an optional
`SysInfo` and falls back to `SysInfo.instance()`; each call to
`update_series()` takes a new reading.

- `CpuChart.slices` holds a `("Load", load)` and `("Free", 100 - load)` pair.
- `MemoryChart.points` holds `(x, percent)` points. Once there are more than
  50, the oldest is dropped and `x_range` moves one step to the right.

The charts record their refresh delays in milliseconds but run no timer;
calling `update_series()` periodically is up to the caller.

## Photo gallery

### Records (`tinyapps.entities`)

`Album` and `Picture` are dataclasses whose `id` (and, for pictures,
`album_id`) is `-1` until they are stored. `Picture.from_path(path)` builds
a picture with a `file:` URL for a local path; `file_name()` returns the
last segment of its URL and `local_file()` the local path of a `file` URL
(an empty string for other schemes).

### Storage (`tinyapps.dao`)

`AlbumDao` and `PictureDao` store albums and pictures in SQLite.
`DatabaseManager(path)` opens a database (by default `gallery.db` in the
current directory) and creates the `albums` and `pictures` tables if they
are missing; `close()` closes it, and the manager can also be used in a
`with` block. `DatabaseManager.instance()` returns a shared manager on the
default file. Failed queries are logged and the `sqlite3` error is raised.

### Models (`tinyapps.models`)

`AlbumModel` and `PictureModel` are list models addressed by row and `Role`.
Both take an optional `DatabaseManager` and fall back to the shared one.

- `AlbumModel`: `add_album`, `row_count`, `data`, `set_data` (renames an
  album through `Role.NAME`), `remove_rows` and `role_names`.
- `PictureModel`: `add_picture`, `row_count`, `data`, `remove_rows`,
  `role_names`, `set_album_id`, `clear_album` and
  `delete_pictures_for_album`. It follows one album at a time, and when rows
  are removed from its `AlbumModel` it deletes the current album's pictures
  and clears itself.

`data` returns `None` for a row out of range or a role the model does not
serve; `remove_rows` returns `False` for an invalid range. Changes are
announced through `Signal` objects (`rows_inserted`, `rows_removed`,
`data_changed`, `model_reset`) that take callbacks with `connect`.

### Thumbnails (`tinyapps.thumbnails`)

`ThumbnailProxyModel` sits over a `PictureModel`, passes its data through,
and for `Role.DECORATION` serves a Pillow image scaled to fit within
350 × 350 pixels. Thumbnails are rebuilt when the picture model is reset and
added when pictures are inserted; a file that cannot be read has no
thumbnail. `size_hint(row)` gives a thumbnail's size, or `(0, 0)`.
`banner_box(x, y, width)` gives the `(x, y, width, 20)` area of the name
banner that goes across the top of a thumbnail.

### Session (`tinyapps.gallery`)

`GallerySession` ties the models together and drives the gallery the way a
user would: `create_album`, `select_album`, `edit_album`, `delete_album`,
`add_pictures`, `activate_picture`, `next_picture`, `previous_picture`,
`delete_picture` and `back_to_gallery`. Deleting an album or picture selects
the previous one, else the next one. Its `view` is a `View` telling whether
the gallery or a single picture is on show, and attributes such as
`album_name`, `picture_name`, `previous_enabled` and `next_enabled` hold
what a screen would display.

## What this package does not do

It has no windows, dialogs or charts drawn on screen, and no command to
start any of the apps. The objects above hold everything such screens would
show; putting them on a display is left to the code that uses them.

## Tests

The test suite uses pytest and is installed with the `test` extra:

    pip install .[test]
    pytest