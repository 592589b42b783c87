from django import forms
from django.contrib import admin
from django.core.exceptions import ValidationError

from events.domain import EVENT_FIELDS, prepare_event
from events.domain.errors import RecordValidationError
from events.models import Booking, Event
from events.stores.django_store import to_event


class EventAdminForm(forms.ModelForm):
    """Runs the same normalization as the API before the admin saves."""

    # Wide enough for the free-form input accepted before normalization.
    date = forms.CharField(max_length=64)
    time = forms.CharField(max_length=16)

    class Meta:
        model = Event
        exclude = ["slug"]

    def clean(self):
        cleaned = super().clean()
        if self.errors:
            return cleaned

        previous = None
        if not self.instance._state.adding:
            previous = to_event(Event.objects.get(pk=self.instance.pk)).to_data()
        changes = {name: cleaned[name] for name in EVENT_FIELDS if name in cleaned}

        try:
            prepared = prepare_event(changes, previous=previous)
        except RecordValidationError as exc:
            raise ValidationError(
                {name: message for name, message in exc.errors.items() if name in self.fields}
                or exc.message
            ) from exc

        if (
            Event.objects.filter(slug=prepared.slug)
            .exclude(pk=self.instance.pk)
            .exists()
        ):
            raise ValidationError({"title": f"An event with slug '{prepared.slug}' already exists"})

        for name in EVENT_FIELDS:
            cleaned[name] = getattr(prepared, name)
        cleaned["mode"] = prepared.mode.value
        cleaned["agenda"] = list(prepared.agenda)
        cleaned["tags"] = list(prepared.tags)
        self.instance.slug = prepared.slug
        return cleaned


class BookingInline(admin.TabularInline):
    model = Booking
    extra = 0
    can_delete = False
    readonly_fields = ["email", "created_at"]

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    form = EventAdminForm
    list_display = ["title", "slug", "date", "time", "mode", "location", "created_at"]
    list_filter = ["mode"]
    search_fields = ["title", "slug", "location", "organizer"]
    readonly_fields = ["slug", "created_at", "updated_at"]
    inlines = [BookingInline]


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = ["email", "event", "created_at"]
    list_filter = ["event"]
    search_fields = ["email"]
    readonly_fields = ["event", "email", "created_at", "updated_at"]

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
