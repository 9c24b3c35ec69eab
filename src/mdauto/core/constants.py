"""Fixed literals: fences, region markers, managed directives, frontmatter defaults"""

from types import MappingProxyType


FENCE_OPEN = "---\n"
FENCE_CLOSE = "\n---\n"

# Markers are detected by prefix; the full literals are only used when inserting.
TOP_MARKER_PREFIX = "<!--@"
BOTTOM_MARKER_PREFIX = "<!--#"
TOP_MARKER = "<!--@ ここから下は自動生成領域です。編集しないでください -->"
BOTTOM_MARKER = "<!--# この行より上は自動生成されます。編集しないでください -->"

IMPORT_SUBTITLE = "import Subtitle from '@site/src/components/Subtitle';"
IMPORT_HEAD = "import Head from '@docusaurus/Head';"
HEAD_BLOCK = """<Head>
  <meta name="robots" content="noindex, nofollow" />
</Head>"""
SUBTITLE_LINE = "<Subtitle text={frontMatter.subtitle} />"

# Serialization order of the normalized frontmatter.
# sidebar_position is never added, only kept (after these) when present.
FRONTMATTER_KEYS = ("id", "slug", "title", "subtitle", "description", "keywords", "noindex")

DEFAULT_DESCRIPTION = "近日公開"
DEFAULT_KEYWORDS = ("例: 管理画面", "例: 初期設定", "例: アンシン")
KEYWORD_PLACEHOLDER = "例:"

FRONTMATTER_DEFAULTS = MappingProxyType({
    "id": "",
    "slug": "",
    "title": "",
    "subtitle": None,
    "description": DEFAULT_DESCRIPTION,
    "keywords": DEFAULT_KEYWORDS,
    "noindex": True,
})

DESCRIPTION_GUIDANCE = (
    "# このフィールドはSEOのためのページ説明文です。検索エンジンやSNSで表示される要約になります。",
    "# 完成したら、noindexフィールドをfalseにしてページをインデックス可能にしてください。",
)
KEYWORDS_GUIDANCE = (
    "# このフィールドはSEO用のキーワードリストです。各キーワードを1行ずつ「-」で記述してください。",
)
