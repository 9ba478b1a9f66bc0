"""Free-threading safe: scan 500 files in parallel and dump JSON."""

import tempfile
from pathlib import Path

from hscan import scan_files, to_json

with tempfile.TemporaryDirectory() as tmp:
    paths = []
    for i in range(500):
        path = Path(tmp) / f"Module{i}.cpp"
        path.write_text(f'hscpp_require_source("Module{i}Impl.cpp");\n', encoding="utf-8")
        paths.append(path)

    results = scan_files(paths, max_workers=8)

print(f"Scanned {len(results)} files in parallel")
first = next(iter(results.values()))
print("First result:", to_json(first))
