from django.db import models


class WaitlistEntry(models.Model):
    """Signup held back by the regional beta gate"""
    email = models.EmailField(unique=True)
    jurisdiction = models.CharField(max_length=50, null=True, blank=True)  # Normalized, e.g. "ON"
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at']
        verbose_name_plural = "Waitlist Entries"

    def __str__(self):
        return f"{self.email} ({self.jurisdiction or 'no province'})"
