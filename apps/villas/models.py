"""
apps.villas.models
~~~~~~~~~~~~~~~~~~
Villa – the single persisted resource exposed by the Villa API.
"""
from django.db import models
from django.db.models.functions import Lower


class Villa(models.Model):
    """
    A rentable villa.

    Fields
    ------
    id
        Auto-incrementing integer primary key.
    name
        Display name.  Unique case-insensitively; enforced by the
        ``villa_name_ci_unique`` constraint on ``LOWER(name)``.
    details / image_url / amenity
        Free text, may be blank.
    rate
        Nightly rate.
    occupancy / sqft
        Guest capacity and floor area in square feet.
    created_date / updated_date
        Persistence-only timestamps.  Never exposed through the API.
    """

    name = models.CharField(max_length=30)
    details = models.TextField(blank=True, default="")
    rate = models.FloatField()
    occupancy = models.PositiveIntegerField(default=0)
    sqft = models.PositiveIntegerField(
        default=0,
        help_text="Floor area in square feet.",
    )
    image_url = models.CharField(max_length=500, blank=True, default="")
    amenity = models.CharField(max_length=255, blank=True, default="")
    created_date = models.DateTimeField(auto_now_add=True)
    updated_date = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]
        constraints = [
            models.UniqueConstraint(Lower("name"), name="villa_name_ci_unique"),
        ]
        verbose_name = "Villa"
        verbose_name_plural = "Villas"

    def __str__(self) -> str:
        return f"#{self.id} {self.name}" if self.id else self.name
