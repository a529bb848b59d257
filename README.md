# ps2suitcase

Tools for working on a PlayStation 2 save folder: the files that go into a
`.psu` archive and the size they take, watching the folder for changes,
colour and lighting helpers for `icon.sys`, geometry helpers for previewing
icons, and launching PCSX2.

## Install

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

Open a save folder, then print its name, each file with its size, and the
size the files would take once packed:

```
ps2suitcase path/to/SAVEFOLDER
```

Options:

- `--storage FILE` – a JSON file that remembers the opened folder and the
  PCSX2 path. It is read at start-up (the folder is reopened if it still
  exists) and written on success. Without it nothing is remembered.
- `--pcsx2 PATH` – the PCSX2 executable, or on macOS the `.app` bundle
  (`/Contents/MacOS/PCSX2` is appended).
- `--validate` – check the folder; this prints `Checking <folder>.`.
- `--run ELF` – start PCSX2 with `-- ELF`.

The command exits with status 1 if no folder is opened or a file operation
fails.

On macOS, rebuild the application bundle `build/PSU Builder.app` in a built
workspace (default: the current directory):

```
ps2suitcase-bundle [WORKSPACE_ROOT]
```

The bundle must already exist, since it is removed first. The executable is
taken from `target/debug/suitcase`, and `ps2.icns` and `Info.plist` from
`../../suitcase/assets` relative to the workspace root. On other systems it
fails with "unsupported operating system".

## Library use

```python
from ps2suitcase.files import read_folder, calc_size

files = read_folder("SAVEFOLDER")   # regular files only, sorted by name
for f in files:
    print(f.name, f.size)
print("packed size:", files.calculated_size())

calc_size(1)     # 1024: files take whole 1 KiB clusters
```

The packed size is 512 bytes for each of the three directory entries, plus
for each file a 512-byte entry and its size rounded up to 1024 bytes.

Modules:

- `ps2suitcase.files` – `VirtualFile`, `Files`, `calc_size`,
  `calculate_size` and `read_folder`.
- `ps2suitcase.state` – `AppState` and its queue of `AppEvent`s
  (`EventKind`), emptied with `drain_events()`.
- `ps2suitcase.watcher` – `FileWatcher`, which watches one folder
  recursively; `change_path()`, `poll_events()`, `stop()`, and use as a
  context manager.
- `ps2suitcase.system` – `reveal_command` / `reveal_file_in_explorer` to
  show a file in the system file manager, and `validate`.
- `ps2suitcase.animation` – `Key` and `Timeline`, linear interpolation of
  animation keys, held constant before the first and after the last key.
- `ps2suitcase.camera` – `OrbitCamera` with `update`, `position`,
  `view_matrix` and `reset_view`.
- `ps2suitcase.geometry` – `Attributes` / `attributes()` vertex layouts,
  `generate_wireframe_box`, `generate_grid_lines`, `build_timelines` and
  `blend_shapes`.
- `ps2suitcase.colors` – `Color`, `ColorF`, `PS2RgbaInterface`,
  `convert_color_to_float` and `convert_color_to_int`.
- `ps2suitcase.app` – `Workspace`, `WorkspaceSave`, `EditorKind`,
  `editor_kind_for`, `pcsx2_command` and `launch_pcsx2`.
- `ps2suitcase.bundle` – `build_app_bundle`.

`Workspace.handle_events()` acts on opening files (as tabs chosen by
`editor_kind_for`), title changes, PCSX2 launching and validation, and
refreshes the file list when the watched folder changes. It returns the
other events (opening a folder or save, adding files, exporting, saving,
creating a title.cfg) for a front end to handle.

## What it does not do

There is no graphical editor or icon preview window. The package does not
read or write `.psu`, `.icn`, `icon.sys` or `title.cfg` files, so exporting
an archive and saving an editor's contents are left to the caller.