# ==========================================
# apps/shoplists/admin.py
# ==========================================

from django.contrib import admin
from django.utils import timezone
from apps.shoplists.models import Shoplist, ShoplistMembership, ShoplistShareCode, ShoplistItem


class ShoplistMembershipInline(admin.TabularInline):
    """Inline admin for shoplist memberships."""
    model = ShoplistMembership
    extra = 0
    fields = ['user', 'joined_at']
    readonly_fields = ['joined_at']


class ShoplistItemInline(admin.TabularInline):
    """Inline admin for shoplist items."""
    model = ShoplistItem
    extra = 0
    fields = ['item_name', 'brand_name', 'is_bought']


@admin.register(Shoplist)
class ShoplistAdmin(admin.ModelAdmin):
    """Admin interface for Shoplists."""

    list_display = ['name', 'owner', 'member_count', 'created_at']
    list_filter = ['created_at']
    search_fields = ['name', 'owner__email']
    readonly_fields = ['created_at', 'updated_at']
    inlines = [ShoplistMembershipInline, ShoplistItemInline]
    date_hierarchy = 'created_at'
    ordering = ['-created_at']

    def member_count(self, obj):
        """Show number of members."""
        return obj.memberships.count()
    member_count.short_description = 'Members'


@admin.register(ShoplistShareCode)
class ShoplistShareCodeAdmin(admin.ModelAdmin):
    """Admin interface for share codes."""

    list_display = ['code', 'shoplist', 'expires_at', 'is_active_display']
    search_fields = ['code', 'shoplist__name']
    ordering = ['-expires_at']

    actions = ['expire_codes']

    def is_active_display(self, obj):
        return obj.is_active()
    is_active_display.boolean = True
    is_active_display.short_description = 'Active'

    @admin.action(description='Expire selected share codes')
    def expire_codes(self, request, queryset):
        """Expire selected codes immediately."""
        now = timezone.now()
        count = queryset.active(now).update(expires_at=now)
        self.message_user(request, f"Expired {count} share code(s)")

    def get_queryset(self, request):
        """Optimize query."""
        qs = super().get_queryset(request)
        return qs.select_related('shoplist')


@admin.register(ShoplistMembership)
class ShoplistMembershipAdmin(admin.ModelAdmin):
    """Admin interface for Shoplist Memberships."""

    list_display = ['user', 'shoplist', 'joined_at']
    list_filter = ['joined_at']
    search_fields = ['user__email', 'shoplist__name']
    readonly_fields = ['joined_at']
    date_hierarchy = 'joined_at'
    ordering = ['-joined_at']

    def get_queryset(self, request):
        """Optimize query."""
        qs = super().get_queryset(request)
        return qs.select_related('user', 'shoplist')
