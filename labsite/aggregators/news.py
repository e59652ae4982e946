"""
News aggregator — public/news/<folder>/index.md → news-generated.json.
Newest first; the category falls back to the first tag.
"""
from labsite.aggregators.base import BaseAggregator
from labsite.aggregators.fields import (
    Field,
    body,
    list_default,
    meta,
    meta_date,
    meta_item,
    meta_list,
    run_year,
    sidecar_url,
    year_of,
)
from labsite.content.assets import FEATURED_IMAGES
from labsite.content.dates import newest_first


class NewsAggregator(BaseAggregator):
    collection = "news"

    fields = (
        Field("title",    (meta("title"),)),
        Field("date",     (meta_date("date"),)),
        Field("year",     (year_of(meta("date")),), default=run_year),
        Field("category", (meta("category"), meta_item("tags"))),
        Field("tags",     (meta_list("tags"),), default=list_default),
        Field("summary",  (meta("summary"), body())),
        Field("content",  (body(),)),
        Field("image",    (meta("image"), sidecar_url(FEATURED_IMAGES))),
        Field("link",     (meta("link"), meta("url"))),
        Field("folder",   (lambda doc, record: doc.folder,)),
    )

    def sort(self, records):
        return newest_first(records, "date")
