"""File Classifier - Type labels and exclusion rules for changed paths."""

import posixpath
import re

from git_commit_ai import FILE_TYPE_LABELS

EXCLUDE_FILE_PATTERNS: list[str] = [
    # Lock files
    'package-lock.json', 'yarn.lock', 'pnpm-lock.yaml', 'composer.lock',
    'Gemfile.lock', 'Pipfile.lock', 'poetry.lock',
    # Build artifacts
    '*.min.js', '*.min.css', '*.bundle.js', '*.bundle.css',
    # Logs
    '*.log', 'npm-debug.log*', 'yarn-debug.log*', 'yarn-error.log*',
    # Temp files
    '*.tmp', '*.temp', '*.swp', '*.swo', '*~',
    # OS metadata
    '.DS_Store', 'Thumbs.db', 'desktop.ini',
    # IDE files
    '.vscode/settings.json', '.idea/workspace.xml', '*.iml',
]

EXCLUDE_DIRECTORIES: set[str] = {
    'node_modules', 'dist', 'build', 'out', 'target',
    '.git', '.svn', '.hg',
    '__pycache__', '.pytest_cache', '.coverage', 'coverage', '.nyc_output',
    'vendor', 'bower_components',
}


def _compile_pattern(pattern: str) -> re.Pattern:
    """'*' matches any characters, everything else is literal."""
    return re.compile('.*'.join(re.escape(part) for part in pattern.split('*')))


_PATTERNS = [(p, _compile_pattern(p)) for p in EXCLUDE_FILE_PATTERNS]


def file_extension(path: str) -> str:
    """Lowercase text after the last '.' of the base name, '' if there is none."""
    name = posixpath.basename(path)
    if '.' not in name:
        return ''
    return name.rsplit('.', 1)[1].lower()


def file_stem(path: str) -> str:
    """Base name without its extension. Dotfiles like .gitignore keep their name."""
    name = posixpath.basename(path)
    stem, dot, _ = name.rpartition('.')
    return stem if dot and stem else name


def exclusion_reason(path: str) -> str | None:
    """Return the directory or file pattern that excludes path, or None."""
    parts = path.split('/')
    for part in parts:
        if part in EXCLUDE_DIRECTORIES:
            return f"{part}/"

    name = parts[-1]
    for pattern, regex in _PATTERNS:
        if '/' in pattern:
            depth = pattern.count('/') + 1
            target = '/'.join(parts[-depth:])
        else:
            target = name
        if regex.fullmatch(target):
            return pattern

    return None


def is_excluded(path: str) -> bool:
    return exclusion_reason(path) is not None


def describe_type(path: str) -> str:
    """Human-readable type label, e.g. 'src/app.ts' -> 'TypeScript'."""
    ext = file_extension(path)
    key = ext or posixpath.basename(path).lower()
    label = FILE_TYPE_LABELS.get(key)
    if label:
        return label
    return f"{ext} file" if ext else "file"
