# storage/models.py

from django.db import models


class KeyValueEntry(models.Model):
    """
    One JSON document per scope key, e.g.
        "cart:user:<uuid>"
        "bookmarks:guest:<token>"

    Whole-document writes only (last write wins).
    """

    scope_key = models.CharField(max_length=191, unique=True)
    value = models.JSONField(default=list)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["scope_key"]
        verbose_name = "Key/value entry"
        verbose_name_plural = "Key/value entries"

    def __str__(self):
        return self.scope_key
