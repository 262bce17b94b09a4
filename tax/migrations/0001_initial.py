from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='ChargeRefund',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('charge_id', models.CharField(max_length=255, unique=True)),
                ('amount_refunded_cents', models.BigIntegerField(default=0)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
        ),
        migrations.CreateModel(
            name='RevenueEvent',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('event_id', models.CharField(max_length=255, unique=True)),
                ('charge_id', models.CharField(db_index=True, max_length=255)),
                ('event_type', models.CharField(choices=[('charge', 'Charge'), ('refund', 'Refund')], max_length=10)),
                ('amount_cents', models.BigIntegerField()),
                ('currency', models.CharField(max_length=3)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['event_type', 'created_at'], name='tax_revenue_type_created_idx')],
            },
        ),
        migrations.CreateModel(
            name='TaxConfig',
            fields=[
                ('id', models.CharField(default='default', max_length=20, primary_key=True, serialize=False)),
                ('tax_mode', models.CharField(choices=[('off', 'Off'), ('on', 'On')], default='off', max_length=3)),
                ('tax_effective_at', models.DateTimeField(blank=True, null=True)),
                ('revenue_cad_cents', models.BigIntegerField(default=0)),
                ('revenue_last_synced_at', models.DateTimeField(blank=True, null=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Tax Configuration',
                'verbose_name_plural': 'Tax Configuration',
            },
        ),
    ]
