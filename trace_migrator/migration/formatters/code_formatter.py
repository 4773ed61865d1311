"""Code formatter for generated test documents."""


class CodeFormatter:
    """Normalizes whitespace in generated code."""

    def __init__(self, max_blank_lines: int = 2):
        """Initialize formatter."""
        self.max_blank_lines = max_blank_lines

    def format_code(self, code: str) -> str:
        """Normalize whitespace in generated code.

        Args:
            code: Raw generated code

        Returns:
            Formatted code
        """
        # Remove trailing whitespace from each line
        lines = [line.rstrip() for line in code.split("\n")]

        # Collapse runs of blank lines
        formatted_lines = []
        blank_count = 0
        for line in lines:
            if line == "":
                blank_count += 1
                if blank_count <= self.max_blank_lines:
                    formatted_lines.append(line)
            else:
                blank_count = 0
                formatted_lines.append(line)

        # Drop leading blank lines, end with exactly one newline
        while formatted_lines and formatted_lines[0] == "":
            formatted_lines.pop(0)
        result = "\n".join(formatted_lines).rstrip("\n")
        return result + "\n"
