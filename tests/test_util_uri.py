import functools
import random
from urllib.parse import quote
from urllib.parse import unquote

import pytest

from httpmessage.util import uri


def _arbitrary_texts(count, length):
    alphabet = uri._PROTECT_ALLOWED + '%[] \t"<>\\^`{|}' + 'çé€日本語パス'
    return (
        ''.join([random.choice(alphabet) for _ in range(length)])
        for __ in range(count)
    )


class TestProtect:
    def setup_method(self, method):
        self.texts = list(_arbitrary_texts(count=100, length=32))

    def test_protect_passthrough(self):
        assert uri.protect('abcd') == 'abcd'
        assert uri.protect('a-b_c.d~e') == 'a-b_c.d~e'
        assert uri.protect("!$'()*+,;") == "!$'()*+,;"

    def test_protect(self):
        assert uri.protect('ab cd') == 'ab%20cd'
        assert uri.protect('100%') == '100%25'
        assert uri.protect('%26') == '%2526'
        assert uri.protect('[zz]') == '%5Bzz%5D'
        assert uri.protect('ç') == '%C3%A7'
        assert uri.protect('日本') == '%E6%97%A5%E6%9C%AC'

    def test_prop_protect_models_stdlib_quote(self):
        equiv_quote = functools.partial(quote, safe=uri._PROTECT_ALLOWED)
        for case in self.texts:
            assert uri.protect(case) == equiv_quote(case)

    def test_prop_protect_is_undone_by_decode(self):
        for case in self.texts:
            assert uri.decode(uri.protect(case), unquote_plus=False) == case


class TestDecode:
    def test_decode(self):
        assert uri.decode('abcd') == 'abcd'
        assert uri.decode('ab%20cd') == 'ab cd'

        assert uri.decode('This thing is %C3%A7') == 'This thing is ç'

        assert (
            uri.decode('This thing is %C3%A7%E2%82%AC') == 'This thing is ç€'
        )

        assert uri.decode('ab%2Fcd') == 'ab/cd'

    @pytest.mark.parametrize(
        'encoded,expected',
        [
            ('ab%2Gcd', 'ab%2Gcd'),
            ('ab%2Fcd: 100% coverage', 'ab/cd: 100% coverage'),
            ('%s' * 100, '%s' * 100),
        ],
    )
    def test_decode_bad_coding(self, encoded, expected):
        assert uri.decode(encoded) == expected

    @pytest.mark.parametrize(
        'encoded,expected',
        [
            ('+%80', ' �'),
            ('+++%FF+++', '   �   '),  # impossible byte
        ],
    )
    def test_decode_bad_unicode(self, encoded, expected):
        assert uri.decode(encoded) == expected

    def test_decode_unquote_plus(self):
        assert uri.decode('/disk/lost+found/fd0') == '/disk/lost found/fd0'
        assert uri.decode('/disk/lost+found/fd0', unquote_plus=False) == (
            '/disk/lost+found/fd0'
        )

        assert uri.decode('q=ab%2Bcd+ef', unquote_plus=False) == 'q=ab+cd+ef'

    def test_prop_decode_models_stdlib_unquote(self):
        for case in _arbitrary_texts(count=100, length=32):
            case = uri.protect(case)
            assert uri.decode(case, unquote_plus=False) == unquote(case)


class TestParseHost:
    def test_parse_host(self):
        assert uri.parse_host('::1') == ('::1', None)
        assert uri.parse_host('2001:ODB8:AC10:FE01::') == (
            '2001:ODB8:AC10:FE01::',
            None,
        )

        ipv6_addr = '2001:4801:1221:101:1c10::f5:116'

        assert uri.parse_host(ipv6_addr) == (ipv6_addr, None)
        assert uri.parse_host('[' + ipv6_addr + ']') == (ipv6_addr, None)
        assert uri.parse_host('[' + ipv6_addr + ']:28080') == (ipv6_addr, '28080')
        assert uri.parse_host('[' + ipv6_addr + ']:42') == (ipv6_addr, '42')
        assert uri.parse_host('[' + ipv6_addr + ']:') == (ipv6_addr, None)

        assert uri.parse_host('173.203.44.122') == ('173.203.44.122', None)
        assert uri.parse_host('173.203.44.122:27070') == ('173.203.44.122', '27070')

        assert uri.parse_host('example.com') == ('example.com', None)
        assert uri.parse_host('example.com:9876') == ('example.com', '9876')
        assert uri.parse_host('example.com:') == ('example.com', None)

    def test_parse_host_keeps_bad_port_verbatim(self):
        assert uri.parse_host('example.com:http') == ('example.com', 'http')
        assert uri.parse_host('[::1]:-1') == ('::1', '-1')

    def test_parse_host_unterminated_bracket(self):
        assert uri.parse_host('[::1') == ('[::1', None)

    def test_parse_host_text_after_bracket(self):
        assert uri.parse_host('[::1]x') == ('[::1]x', None)


@pytest.mark.parametrize(
    'netloc,expected',
    [
        ('', (None, None, '', None)),
        ('example.org', (None, None, 'example.org', None)),
        ('example.org:8080', (None, None, 'example.org', '8080')),
        ('bob@example.org', ('bob', None, 'example.org', None)),
        ('bob:@example.org', ('bob', '', 'example.org', None)),
        ('bob:s3cr3t@example.org:21', ('bob', 's3cr3t', 'example.org', '21')),
        ('a@b@example.org', ('a@b', None, 'example.org', None)),
        ('bob:pw@[::1]:443', ('bob', 'pw', '::1', '443')),
    ],
)
def test_parse_netloc(netloc, expected):
    assert uri.parse_netloc(netloc) == expected
