# Generated manually for the shoplists app

from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Shoplist',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('owner', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='owned_shoplists', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'shoplists',
                'ordering': ['id'],
                'indexes': [models.Index(fields=['owner', 'created_at'], name='shoplists_owner_created_idx')],
            },
        ),
        migrations.CreateModel(
            name='ShoplistMembership',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('joined_at', models.DateTimeField(auto_now_add=True)),
                ('shoplist', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='memberships', to='shoplists.shoplist')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='shoplist_memberships', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'shoplist_members',
                'ordering': ['joined_at', 'id'],
                'indexes': [models.Index(fields=['user', 'joined_at'], name='shoplist_members_user_idx')],
                'constraints': [models.UniqueConstraint(fields=('shoplist', 'user'), name='unique_shoplist_member')],
            },
        ),
        migrations.CreateModel(
            name='ShoplistShareCode',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('code', models.CharField(max_length=16, unique=True)),
                ('expires_at', models.DateTimeField()),
                ('shoplist', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='share_code', to='shoplists.shoplist')),
            ],
            options={
                'db_table': 'shoplist_share_codes',
                'indexes': [models.Index(fields=['code', 'expires_at'], name='share_codes_code_expiry_idx')],
            },
        ),
        migrations.CreateModel(
            name='ShoplistItem',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('item_name', models.CharField(max_length=255)),
                ('brand_name', models.CharField(blank=True, max_length=255)),
                ('extra_info', models.TextField(blank=True)),
                ('thumbnail', models.URLField(blank=True, max_length=500)),
                ('is_bought', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('shoplist', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='items', to='shoplists.shoplist')),
            ],
            options={
                'db_table': 'shoplist_items',
                'ordering': ['id'],
            },
        ),
    ]
