"""
Bloglist API - Blog List Aggregations
======================================

Pure functions over an in-memory list of blog records. A record is any
mapping with "author" and "likes" keys (e.g. BlogResponse.model_dump()).
A missing "likes" counts as zero.

Every function is total: an empty list returns 0 (total_likes) or None.
Ties resolve to the first record/author encountered, since max() keeps the
first maximal element.
"""

from collections import Counter, defaultdict
from typing import Any, Dict, Mapping, Optional, Sequence

Record = Mapping[str, Any]


def _likes(blog: Record) -> int:
    return blog.get("likes") or 0


def total_likes(blogs: Sequence[Record]) -> int:
    return sum(_likes(blog) for blog in blogs)


def favorite_blog(blogs: Sequence[Record]) -> Optional[Record]:
    """Return the blog with the most likes, or None for an empty list."""
    if not blogs:
        return None
    return max(blogs, key=_likes)


def most_blogs(blogs: Sequence[Record]) -> Optional[Dict[str, Any]]:
    """Return {"author", "blogs"} for the author with the most blogs."""
    if not blogs:
        return None

    counts = Counter(blog.get("author") for blog in blogs)
    author, count = max(counts.items(), key=lambda item: item[1])
    return {"author": author, "blogs": count}


def most_likes(blogs: Sequence[Record]) -> Optional[Dict[str, Any]]:
    """Return {"author", "likes"} for the author with the highest summed likes."""
    if not blogs:
        return None

    likes_by_author: Dict[Any, int] = defaultdict(int)
    for blog in blogs:
        likes_by_author[blog.get("author")] += _likes(blog)

    author, likes = max(likes_by_author.items(), key=lambda item: item[1])
    return {"author": author, "likes": likes}
