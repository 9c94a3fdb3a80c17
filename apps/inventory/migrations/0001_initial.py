from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Item',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('user_id', models.CharField(max_length=64)),
                ('name', models.CharField(max_length=255)),
                ('quantity_value', models.FloatField()),
                ('quantity_unit', models.CharField(max_length=50)),
                ('buying_price', models.FloatField()),
                ('selling_price', models.FloatField()),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'items',
                'ordering': ['-created_at', '-id'],
                'indexes': [models.Index(fields=['user_id', 'created_at'], name='items_user_created_idx')],
            },
        ),
    ]
