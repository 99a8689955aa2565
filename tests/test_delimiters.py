from csharp_scanner.core.delimiters import (
    DelimiterBalancer,
    find_block_end,
    find_closing,
    iter_top_level,
    skip_group,
    split_top_level,
    strip_line_comment,
)


class TestDelimiterBalancer:
    def test_counts_each_delimiter_independently(self):
        balancer = DelimiterBalancer()
        balancer.feed_text("Foo<Bar(x{")
        assert (balancer.angle, balancer.paren, balancer.brace) == (1, 1, 1)
        assert balancer.depth == 3

    def test_unmatched_closers_never_go_negative(self):
        balancer = DelimiterBalancer()
        balancer.feed_text(")}>>")
        assert balancer.depth == 0
        balancer.feed_text("(")
        assert balancer.paren == 1

    def test_lambda_arrow_is_not_a_closer(self):
        balancer = DelimiterBalancer()
        balancer.feed_text("Func<int, int> f = x =>")
        assert balancer.at_top_level()
        balancer.feed_text("List<int")
        balancer.feed_text("=>")
        assert balancer.angle == 1

    def test_ignores_string_and_char_literals(self):
        balancer = DelimiterBalancer()
        balancer.feed_text('{ var s = "}"; var c = \'{\'; var e = "\\"}";')
        assert balancer.brace == 1

    def test_verbatim_string_with_doubled_quotes(self):
        balancer = DelimiterBalancer()
        balancer.feed_text('{ var s = @"say ""}"" now";')
        assert balancer.brace == 1

    def test_interpolated_verbatim_string_ends_at_its_quote(self):
        for prefix in ("@$", "$@"):
            balancer = DelimiterBalancer()
            balancer.feed_text("{ var p = " + prefix + '"C:\\dir\\"; }')
            assert balancer.brace == 0

    def test_ignores_comments(self):
        balancer = DelimiterBalancer()
        balancer.feed_text("{ // }\n")
        balancer.feed_text("/* } } */ (")
        assert balancer.brace == 1
        assert balancer.paren == 1

    def test_brace_only_mode_skips_angles(self):
        balancer = DelimiterBalancer(track_angles=False)
        balancer.feed_text("if (a < b) {")
        assert balancer.angle == 0
        assert balancer.brace == 1


def test_find_closing_skips_nested_groups():
    text = "Foo(Dictionary<string, (int a, int b)> map, int c) rest"
    assert text[find_closing(text, 3)] == ")"
    assert find_closing(text, 3) == text.index(") rest")


def test_find_closing_unterminated_returns_minus_one():
    assert find_closing("Foo(int a,", 3) == -1
    assert find_closing("abc", 0) == -1


def test_skip_group():
    text = "Task<List<int>> Name"
    assert skip_group(text, 4) == text.index(" Name")
    assert skip_group(text, 0) == 0
    assert skip_group("Foo<int", 3) == len("Foo<int")


def test_split_top_level_keeps_nested_commas():
    pieces = split_top_level(" Base, IDictionary<string, int>, IFoo<(int, int)>")
    assert [p.strip() for p in pieces] == ["Base", "IDictionary<string, int>", "IFoo<(int, int)>"]


def test_iter_top_level_yields_openers_but_not_contents():
    chars = "".join(ch for _, ch in iter_top_level("a<b,c>(d)e"))
    assert chars == "a<(e"


def test_find_block_end_spans_lines():
    lines = ["void M()", "{", "    if (x) { y(); }", '    var s = "}";', "}", "after"]
    assert find_block_end(lines, 1, 0) == 4


def test_find_block_end_unterminated_runs_to_last_line():
    lines = ["{", "  a();", "  b();"]
    assert find_block_end(lines, 0, 0) == 2


def test_strip_line_comment():
    assert strip_line_comment("public int Load(string path) // reads the file") == "public int Load(string path) "
    assert strip_line_comment('string url = "http://host"; // default') == 'string url = "http://host"; '
    assert strip_line_comment("int a = b / c;") == "int a = b / c;"
