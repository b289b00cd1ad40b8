from comment_parser.extractor import CommentExtractor, HeaderAttribute, extract_comments

GOLDEN_IN  = b"/** \n### Widget ###\ntext\n**/"
GOLDEN_OUT = b"\n### Widget {#Widget}\ntext\n\n"

SAMPLE = b"""/**
### slice_set ###

Initialize a slice.

#### parameters ####

+ s
  * slice struct
*/
static void slice_set(struct slice *s) {
\ts->pos = 0;
}
"""


def test_golden_fixture():
    assert extract_comments(GOLDEN_IN) == GOLDEN_OUT


def test_source_without_api_blocks_gives_empty_output():
    src = b"int main(void) {\n\t/* plain comment */\n\treturn a * b;\n}\n"
    assert extract_comments(src) == b""


def test_block_text_followed_by_single_newline():
    assert extract_comments(b"/** text **/") == b"text \n"


def test_short_close_at_end_of_input():
    result = CommentExtractor().run(b"/** text */")
    assert result.text == b"text \n"
    assert result.blocks == 1
    assert not result.unterminated


def test_text_between_blocks_is_dropped():
    src = b"code();\n/** a **/\nmore();\n/** b */\nend();\n"
    assert extract_comments(src) == b"a \nb \n"


def test_level3_id_is_leading_identifier():
    src = b"/** \n### Foo Bar ###\n**/"
    assert extract_comments(src) == b"\n### Foo Bar {#Foo}\n\n"


def test_level3_id_after_ampersand():
    src = b"/** \n### some &init_func more text ###\n**/"
    assert extract_comments(src) == b"\n### some &init_func more text {#init_func}\n\n"


def test_level3_id_after_percent():
    src = b"/** \n### macro %widget_new ###\n**/"
    result = CommentExtractor().run(src)
    assert result.headers == [HeaderAttribute("id", b"widget_new")]


def test_level3_without_identifier_gives_empty_id():
    src = b"/** \n### (intro) ###\n**/"
    assert extract_comments(src) == b"\n### (intro) {#}\n\n"


def test_level3_closed_by_newline_keeps_line_break():
    src = b"/** \n### Widget\ntext\n**/"
    assert extract_comments(src) == b"\n### Widget {#Widget}\ntext\n\n"


def test_level4_class_is_full_trimmed_text():
    src = b"/** \n#### Section Name ####\n**/"
    assert extract_comments(src) == b"\n#### Section Name {.Section Name}\n\n"


def test_other_pound_runs_are_copied_verbatim():
    src = b"/** \n# One\n## Two ##\n##### Five #####\n**/"
    assert extract_comments(src) == b"\n# One\n## Two ##\n##### Five #####\n\n"


def test_unclosed_level4_header_resets_at_newline():
    src = b"/** \n#### returns\nnothing #\n**/"
    assert extract_comments(src) == b"\n#### returns\nnothing #\n\n"


def test_latin1_umlauts_are_reencoded():
    src = b"/** \nGr\xfc\xdfe\n**/"
    assert extract_comments(src) == "\nGrüße\n\n".encode("utf-8")


def test_realistic_block_with_parameters():
    expected = (
        b"### slice_set {#slice_set}\n"
        b"\n"
        b"Initialize a slice.\n"
        b"\n"
        b"#### parameters {.parameters}\n"
        b"\n"
        b"+ s\n"
        b"  * slice struct\n"
        b"\n"
    )
    result = CommentExtractor().run(SAMPLE)
    assert result.text == expected
    assert result.blocks == 1
    assert result.headers == [
        HeaderAttribute("id", b"slice_set"),
        HeaderAttribute("class", b"parameters"),
    ]
    assert [h.value for h in result.headers] == ["slice_set", "parameters"]


def test_unterminated_block_keeps_text_without_newline():
    result = CommentExtractor().run(b"x();\n/** \ntext")
    assert result.text == b"\ntext"
    assert result.unterminated
    assert result.blocks == 0


def test_extracting_twice_gives_empty_output():
    once = extract_comments(GOLDEN_IN)
    assert extract_comments(once) == b""


def test_each_run_starts_with_fresh_state():
    extractor = CommentExtractor()
    assert extractor.run(b"/** \nopen block").unterminated
    second = extractor.run(b"plain text *")
    assert second.text == b""
    assert not second.unterminated


def test_header_attribute_markup():
    assert HeaderAttribute("id", b"foo").markup() == b"{#foo}"
    assert HeaderAttribute("class", b"Section Name").markup() == b"{.Section Name}"


def test_sigil_as_last_header_character_gives_empty_id():
    assert extract_comments(b"/** \n### foo & ###\n*/") == b"\n### foo & {#}\n\n"
    result = CommentExtractor().run(b"/** \n### bar % ###\n*/")
    assert result.headers == [HeaderAttribute("id", b"")]
