"""Thread safety tests for conversion.

Passes are pure functions of their input, so independent documents can be
converted from many threads at once without synchronization.
"""

from concurrent.futures import ThreadPoolExecutor

from pasada import ConvertConfig, convert, convert_config_context

DOCUMENTS = [
    "# Title {#t}\n",
    "a|b\n---|---\n1|2\n",
    "- a\n  - b\n- c\n",
    "**bold** and *em* :smile:",
    "```py\nx = '<y>'\n```\n",
    "> quote\n>> deeper\n",
    "[link](http://x.org) ![img](a.png)",
    "Term : definition\n(c) 2024 +- 1",
]


class TestConcurrentConversion:
    def test_results_match_sequential(self) -> None:
        expected = [convert(doc) for doc in DOCUMENTS]

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(convert, DOCUMENTS * 25))

        assert results == expected * 25

    def test_config_is_per_thread(self) -> None:
        source = '[a](b"c)'

        def escaped(_: int) -> str:
            with convert_config_context(ConvertConfig(escape_attributes=True)):
                return convert(source)

        def verbatim(_: int) -> str:
            return convert(source)

        with ThreadPoolExecutor(max_workers=8) as pool:
            escaped_results = pool.map(escaped, range(50))
            verbatim_results = pool.map(verbatim, range(50))

            assert set(escaped_results) == {'<a href="b&quot;c">a</a>'}
            assert set(verbatim_results) == {'<a href="b"c">a</a>'}
