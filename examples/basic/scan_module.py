"""Scan one hot-reloadable module and print what it requires."""

from hscan import scan

source = """\
#include "hscpp/module/Tracker.h"

hscpp_require_source("Printer.cpp", "Util.cpp");
hscpp_require_include("../include");
hscpp_require_lib("user32.lib");
hscpp_preprocessor_definitions(HSCPP_RUNTIME, "VERSION=3");

// hscpp_require_lib("commented-out.lib")
"""

result = scan(source, source_file="Printer.cpp")

print("Sources:", result.sources)
print("Include paths:", result.include_paths)
print("Libraries:", result.libraries)
print("Definitions:", result.preprocessor_definitions)
