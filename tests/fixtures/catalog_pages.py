# ABOUTME: Canned J-WID and NexTone search result pages for testing.
# ABOUTME: Provides HTML strings matching the structure each parser expects, plus edge cases.

JWID_URL = "https://www2.jasrac.or.jp/eJwid/"
NEXTONE_URL = "https://search.nex-tone.co.jp/"

JWID_RESULTS_HTML = """
<html>
<body>
<table class="search-results">
  <tr class="header"><th>Title</th><th>Artist</th><th>Code</th></tr>
  <tr class="result">
    <td class="title">Sample Song</td>
    <td class="artist">Artist X</td>
    <td class="workcode">1234567-8</td>
    <td class="bpm">128</td>
    <td class="key">A minor</td>
    <td><a class="detail" href="/eJwid/detail?code=12345678">detail</a></td>
  </tr>
  <tr class="result">
    <td class="title">Sample Song (Remix)</td>
    <td class="artist">Artist Y</td>
    <td class="workcode">N/A</td>
  </tr>
  <tr class="result">
    <td class="title">   </td>
    <td class="artist">Nobody</td>
    <td class="workcode">111-2222-3</td>
  </tr>
</table>
</body>
</html>
"""

JWID_SINGLE_NO_CODE_HTML = """
<table class="search-results">
  <tr class="result">
    <td class="title">Sample Song</td>
    <td class="artist">Artist X</td>
    <td class="workcode"></td>
  </tr>
</table>
"""

NEXTONE_RESULTS_HTML = """
<html>
<body>
<div class="results">
  <div class="result-item">
    <span class="title">Sample Song</span>
    <span class="artist">Artist X</span>
    <a href="https://search.nex-tone.co.jp/work/N0001">open</a>
  </div>
  <div class="result-item">
    <span class="title">Other Song</span>
    <span class="artist">Someone Else</span>
    <span class="code">9876-5432</span>
    <span class="bpm">90</span>
    <span class="key">C major</span>
    <a href="work/N0002">open</a>
  </div>
  <div class="result-item">
    <span class="artist">Untitled Artist</span>
  </div>
</div>
</body>
</html>
"""

NO_RESULTS_HTML = "<html><body><p>No results found.</p></body></html>"

NOT_HTML = '{"error": "unexpected payload"}'
