import pytest
from wputils.utils.markup import (
    balance_tags,
    ends_sentence,
    strip_captions_and_images,
    strip_prefixed_shortcodes,
    strip_shortcodes,
    strip_tags,
    tokenize,
)
from wputils.utils.text import clean_text, word_count


class TestTokenize:
    def test_words_keep_trailing_whitespace(self):
        assert tokenize('<p>Hello  world</p>') == ['<p>', 'Hello  ', 'world', '</p>']

    def test_tags_are_atomic(self):
        assert tokenize('<a href="x y">link</a>') == ['<a href="x y">', 'link', '</a>']

    def test_empty(self):
        assert tokenize('') == []
        assert tokenize(None) == []

    @pytest.mark.parametrize('token,expected', [
        ('done. ', True),
        ('done?', True),
        ('done!\n', True),
        ('done', False),
        ('e.g', False),
    ])
    def test_ends_sentence(self, token, expected):
        assert ends_sentence(token) is expected


class TestStripping:
    def test_strip_tags_keeps_allowed(self):
        html = '<p>Hi <a href="x">there</a> <em>you</em></p>'
        assert strip_tags(html, {'a'}) == 'Hi <a href="x">there</a> you'

    def test_strip_tags_is_case_insensitive(self):
        assert strip_tags('<A HREF="x">y</A>', {'a'}) == '<A HREF="x">y</A>'

    def test_strip_tags_normalises_spaced_allowed_tags(self):
        html = '< a href="/x">this</ a> more'
        assert strip_tags(html, {'a'}) == '<a href="/x">this</a> more'

    def test_strip_tags_drops_attributes_with_tag(self):
        assert strip_tags('<span style="color:red">red</span>', ()) == 'red'

    def test_strip_shortcodes(self):
        assert strip_shortcodes('[gallery ids="1,2"]Pics[/gallery]') == 'Pics'
        assert strip_shortcodes('[audio src="a.mp3" /]') == ''
        assert strip_shortcodes('[[gallery]]') == '[gallery]'
        assert strip_shortcodes('See note [1].') == 'See note [1].'

    def test_strip_prefixed_shortcodes(self):
        html = '[vc_row]a[/vc_row][et_pb_text]b[/et_pb_text][gallery]'
        assert strip_prefixed_shortcodes(html, ('vc_', 'et')) == 'ab[gallery]'
        assert strip_prefixed_shortcodes(html, ()) == html

    def test_strip_multiline_caption(self):
        html = '[caption id="1"]\n<img src="a.jpg">\nText[/caption]after'
        assert strip_captions_and_images(html) == 'after'


class TestBalanceTags:
    def test_closes_inner_tags_first(self):
        assert balance_tags('<b><i>x</b>') == '<b><i>x</i></b>'

    def test_drops_stray_closers(self):
        assert balance_tags('x</p>y') == 'xy'

    def test_closes_open_tags_at_end(self):
        assert balance_tags('<a href="/">open') == '<a href="/">open</a>'

    def test_void_and_self_closing_tags(self):
        html = 'a<br>b<img src="x"/>c<span/>'
        assert balance_tags(html) == html

    def test_nested_same_tag(self):
        assert balance_tags('<div><div>x</div>') == '<div><div>x</div></div>'

    def test_reopened_anchor_closes_previous(self):
        html = 'Read <a href="/1">first <a href="/2">second'
        assert balance_tags(html) == 'Read <a href="/1">first </a><a href="/2">second</a>'

    def test_reopened_paragraph_closes_previous(self):
        assert balance_tags('<p>one<p>two') == '<p>one</p><p>two</p>'

    def test_list_items_become_siblings(self):
        assert balance_tags('<ul><li>one<li>two</ul>') == '<ul><li>one</li><li>two</li></ul>'

    @pytest.mark.parametrize('html', [
        '<b><i>x</b>',
        '<a href="/">open <em>and <strong>deep',
        '</div>text</span><p>para',
        '<ul><li>one<li>two</ul>',
        '<p>one<p>two',
        '<a href="/1">one <a href="/2">two',
        'plain text',
    ])
    def test_idempotent(self, html):
        once = balance_tags(html)
        assert balance_tags(once) == once


class TestTextUtils:
    def test_clean_text(self):
        assert clean_text('<p>Hello <b>world</b></p>') == 'Hello world'
        assert clean_text('  spaces   everywhere  ') == 'spaces everywhere'
        assert clean_text('&amp; entity') == '& entity'

    def test_word_count_ignores_markup(self):
        assert word_count('<p>One <a href="/a b c">two</a> three</p>') == 3
        assert word_count('') == 0
