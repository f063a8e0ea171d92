[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mos6502"
version = "0.1.0"
description = "MOS 6502 assembly toolkit: syntax tree, symbol resolution, code generation and disassembly"
requires-python = ">=3.10"
dependencies = []
keywords = ["6502", "mos6502", "assembler", "disassembler", "machine-code", "8-bit"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Assemblers",
    "Topic :: Software Development :: Disassemblers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mos6502-disasm = "mos6502.disassembler:main"

[tool.hatch.build.targets.wheel]
packages = ["mos6502"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
