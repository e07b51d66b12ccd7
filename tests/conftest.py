from textwrap import dedent

import pytest


@pytest.fixture
def search_results_page() -> str:
    html_page = """
    <html>
        <body>
            <div id="links">
                <div class="result">
                    <a class="result__a" href="//duckduckgo.com/l/?uddg=https%3A%2F%2Fexample.com%2Fa">
                        Result A
                    </a>
                    <a class="result__snippet" href="//duckduckgo.com/l/?uddg=https%3A%2F%2Fexample.com%2Fa">
                        The first result.
                    </a>
                </div>
                <div class="result">
                    <a class="result__a" href="https://example.com/b">Result B</a>
                </div>
            </div>
        </body>
    </html>
    """

    return dedent(html_page).strip()


@pytest.fixture
def article_page() -> str:
    html_page = """
    <html><head><title>Page T</title></head>
    <body>
        <article><h1>Headline</h1><p>Hello world content.</p></article>
    </body></html>
    """

    return dedent(html_page).strip()
