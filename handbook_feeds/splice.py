"""
Targeted edits to the feed document.

The feed is a hand-authored RSS template. Only the build dates and the
<item> blocks inside <channel> are rewritten; every other byte, and all of
the text from </channel> to the end, is kept as it is. The document is never
parsed and re-serialised as XML.
"""
import re
from datetime import datetime

from .dates import format_rfc2822
from .errors import FeedTemplateError

CHANNEL_OPEN_RE = re.compile(r"<channel(?:\s[^>]*)?>")
CHANNEL_CLOSE = "</channel>"
PUBDATE_RE = re.compile(r"<pubDate>[^<]*</pubDate>")
LAST_BUILD_DATE_RE = re.compile(r"<lastBuildDate>[^<]*</lastBuildDate>")
ITEM_BLOCK_RE = re.compile(r"<item>.*?</item>\s*", re.DOTALL)
AFTER_LAST_BUILD_DATE_RE = re.compile(r"(</lastBuildDate>\s*\n)")
BLANK_RUN_RE = re.compile(r"\n{3,}")


def split_channel(content: str):
    """
    Split the document at the first </channel>.

    Returns (prefix, tail); the tail starts with "</channel>".
    """
    if not CHANNEL_OPEN_RE.search(content):
        raise FeedTemplateError("Invalid feed template: no <channel> element")
    idx = content.find(CHANNEL_CLOSE)
    if idx == -1:
        raise FeedTemplateError("Could not find </channel> in template")
    return content[:idx], content[idx:]


def stamp_build_dates(text: str, stamp: str) -> str:
    """Set the first <pubDate> and the first <lastBuildDate> to `stamp`."""
    text = PUBDATE_RE.sub(lambda m: f"<pubDate>{stamp}</pubDate>", text, count=1)
    text = LAST_BUILD_DATE_RE.sub(lambda m: f"<lastBuildDate>{stamp}</lastBuildDate>", text, count=1)
    return text


def rebuild_document(content: str, rendered_items, now: datetime) -> str:
    """
    Replace the channel's items with `rendered_items` and stamp the build dates.

    Existing <item> blocks are all removed first, so running this again on its
    own output only changes the dates. Runs of blank lines are collapsed to
    one so repeated rebuilds do not accumulate whitespace.
    """
    prefix, tail = split_channel(content)

    prefix = stamp_build_dates(prefix, format_rfc2822(now, "en"))
    prefix = ITEM_BLOCK_RE.sub("", prefix)
    prefix = prefix.rstrip() + "\n\n"

    document = prefix + "\n".join(rendered_items) + "\n" + tail
    return BLANK_RUN_RE.sub("\n\n", document)


def insert_item(content: str, rendered_item: str, stamp: str) -> str:
    """
    Insert one rendered item without touching the existing ones.

    The item goes after the line holding </lastBuildDate>, or right before
    </channel> when the template has no lastBuildDate. Items are not re-sorted;
    the next full rebuild puts them in order.
    """
    content = stamp_build_dates(content, stamp)

    updated, n = AFTER_LAST_BUILD_DATE_RE.subn(
        lambda m: m.group(1) + "\n" + rendered_item, content, count=1
    )
    if n:
        return updated

    idx = content.find(CHANNEL_CLOSE)
    if idx == -1:
        raise FeedTemplateError("Could not find </lastBuildDate> or </channel> in feed")
    return content[:idx] + rendered_item + content[idx:]
