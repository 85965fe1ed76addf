"""
Git Commit AI

Drafts commit messages for staged git changes with Claude, falling back to a
heuristic message when the API is unavailable.
"""

__version__ = "1.0.0"

# Shared extension -> label table - single source of truth
# Used by: summary/classifier.py (type labels), summary/fallback.py (message noun)
FILE_TYPE_LABELS = {
    'js': 'JavaScript',
    'ts': 'TypeScript',
    'jsx': 'React',
    'tsx': 'React TypeScript',
    'css': 'CSS',
    'scss': 'SCSS',
    'sass': 'Sass',
    'html': 'HTML',
    'md': 'Markdown',
    'json': 'JSON',
    'yml': 'YAML',
    'yaml': 'YAML',
    'toml': 'TOML',
    'py': 'Python',
    'rb': 'Ruby',
    'go': 'Go',
    'java': 'Java',
    'php': 'PHP',
    'c': 'C',
    'cpp': 'C++',
    'h': 'C/C++ header',
    'cs': 'C#',
    'rs': 'Rust',
    'swift': 'Swift',
    'kt': 'Kotlin',
    'sql': 'SQL',
    'sh': 'Shell',
    'bat': 'Batch',
    'ps1': 'PowerShell',
    'gitignore': 'Git config',
    'dockerignore': 'Docker config',
    'dockerfile': 'Dockerfile',
    'xml': 'XML',
    'svg': 'SVG',
    'txt': 'Text',
}

# Change statuses reported by the git layer, in display order
CHANGE_STATUSES = ('added', 'modified', 'deleted')
