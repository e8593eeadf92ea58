from fsbox.core.log_sanitizer import sanitize_for_logging, summarize_tool_arguments_for_logging


class TestSanitizeForLogging:
    """Test suite for sanitize_for_logging function."""

    def test_clean_string_unchanged(self):
        assert sanitize_for_logging("docs/readme.md") == "docs/readme.md"

    def test_removes_newlines(self):
        assert sanitize_for_logging("a.txt\nFAKE LOG LINE") == "a.txtFAKE LOG LINE"
        assert sanitize_for_logging("Windows\r\nLine") == "WindowsLine"

    def test_removes_unicode_line_separators(self):
        assert sanitize_for_logging("A\u2028B\u2029C") == "ABC"

    def test_removes_ansi_escape_character(self):
        assert sanitize_for_logging("\x1b[31mRed\x1b[0m") == "[31mRed[0m"

    def test_removes_null_bytes(self):
        assert sanitize_for_logging("bad\x00name") == "badname"

    def test_none_and_non_strings(self):
        assert sanitize_for_logging(None) == ""
        assert sanitize_for_logging(123) == "123"
        assert sanitize_for_logging(True) == "True"


class TestSummarizeToolArguments:
    def test_content_is_reduced_to_length(self):
        summary = summarize_tool_arguments_for_logging({"filePath": "a.txt", "content": "secret"})
        assert summary == "content_chars=6 filePath=a.txt"
        assert "secret" not in summary

    def test_values_are_sanitized(self):
        summary = summarize_tool_arguments_for_logging({"filePath": "a\nb.txt", "recursive": True})
        assert summary == "filePath=ab.txt recursive=True"

    def test_non_string_content(self):
        assert summarize_tool_arguments_for_logging({"content": None}) == "content_chars=0"

    def test_non_mapping(self):
        assert summarize_tool_arguments_for_logging(["x"]) == "arguments_type=list"
