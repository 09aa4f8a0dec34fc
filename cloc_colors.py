"""Language badge colors (GitHub linguist palette)."""

DEFAULT_COLOR = "#CCCCCC"

LANGUAGE_COLORS = {
    "Assembly": "#6E4C13",
    "Bourne Again Shell": "#89E051",
    "Bourne Shell": "#89E051",
    "C": "#555555",
    "C#": "#178600",
    "C++": "#F34B7D",
    "C/C++ Header": "#F34B7D",
    "CMake": "#DA3434",
    "CSS": "#563D7C",
    "Clojure": "#DB5855",
    "CoffeeScript": "#244776",
    "Dart": "#00B4AB",
    "Dockerfile": "#384D54",
    "Elixir": "#6E4A7E",
    "Elm": "#60B5CC",
    "Erlang": "#B83998",
    "F#": "#B845FC",
    "Fortran 90": "#4D41B1",
    "Go": "#00ADD8",
    "GraphQL": "#E10098",
    "Groovy": "#4298B8",
    "HTML": "#E34C26",
    "Haskell": "#5E5086",
    "INI": "#D1DBE0",
    "JSON": "#292929",
    "JSX": "#F1E05A",
    "Java": "#B07219",
    "JavaScript": "#F1E05A",
    "Julia": "#A270BA",
    "Kotlin": "#A97BFF",
    "Lua": "#000080",
    "Markdown": "#083FA1",
    "Nix": "#7E7EFF",
    "OCaml": "#EF7A08",
    "Objective-C": "#438EFF",
    "PHP": "#4F5D95",
    "Perl": "#0298C3",
    "PowerShell": "#012456",
    "Protocol Buffers": "#4285F4",
    "Python": "#3572A5",
    "R": "#198CE7",
    "Ruby": "#701516",
    "Rust": "#DEA584",
    "SCSS": "#C6538C",
    "SQL": "#E38C00",
    "Scala": "#C22D40",
    "Svelte": "#FF3E00",
    "Swift": "#F05138",
    "TOML": "#9C4221",
    "TypeScript": "#3178C6",
    "Vuejs Component": "#41B883",
    "XML": "#0060AC",
    "YAML": "#CB171E",
    "Zig": "#EC915C",
    "make": "#427819",
}


def get_color(language: str) -> str:
    """Get the display color for a language name."""
    return LANGUAGE_COLORS.get(language, DEFAULT_COLOR)
