[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "herewego"
version = "0.1.0"
description = "Small data structures, line-driven terminal tools and helper servers: a kubectl navigator, pagers, forms, an echo server and a daily job runner"
requires-python = ">=3.10"
keywords = [
    "data-structures",
    "fenwick-tree",
    "lfu-cache",
    "trie",
    "kubernetes",
    "kubectl",
    "redis",
    "pager",
    "terminal",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]
dependencies = [
    "redis",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
herewego-select = "herewego.select:main"
herewego-pager = "herewego.viewport:main"
herewego-kube = "herewego.screen:main"
herewego-stream = "herewego.streamview:main"
herewego-echo = "herewego.echo:main"
herewego-fileserver = "herewego.fileserver:main"
herewego-scheduler = "herewego.scheduler:main"
herewego-shell = "herewego.remote_shell:main"
herewego-giftdraw = "herewego.giftdraw:main"
herewego-form = "herewego.form:main"

[tool.hatch.build.targets.wheel]
packages = ["herewego"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
