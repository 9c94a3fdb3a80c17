from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Goal',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('user_id', models.CharField(max_length=64)),
                ('target_revenue', models.FloatField()),
                ('target_profit', models.FloatField()),
                ('deadline', models.DateField()),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'db_table': 'goals',
                'ordering': ['-created_at', '-id'],
                'indexes': [models.Index(fields=['user_id', 'created_at'], name='goals_user_created_idx')],
            },
        ),
    ]
