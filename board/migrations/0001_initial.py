import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Issue',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('issue_key', models.CharField(db_index=True, max_length=32, unique=True)),
                ('summary', models.TextField()),
                ('description', models.TextField()),
                ('acceptance_criteria', models.TextField()),
                ('issue_type', models.CharField(choices=[('Story', 'Story'), ('Bug', 'Bug'), ('Task', 'Task'), ('Spike', 'Spike')], default='Story', max_length=10)),
                ('priority', models.CharField(choices=[('P0', 'P0'), ('P1', 'P1'), ('P2', 'P2'), ('P3', 'P3')], default='P2', max_length=2)),
                ('story_points', models.DecimalField(blank=True, decimal_places=2, max_digits=6, null=True, validators=[django.core.validators.MinValueValidator(0)])),
                ('start_date', models.DateField(blank=True, null=True)),
                ('due_date', models.DateField(blank=True, null=True)),
                ('sprint', models.CharField(blank=True, max_length=100, null=True)),
                ('status', models.CharField(choices=[('backlog', 'Backlog'), ('sprint', 'Sprint'), ('in_progress', 'In progress'), ('done', 'Done'), ('released', 'Released')], default='backlog', max_length=20)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'issues',
                'ordering': ['-created_at', '-id'],
                'indexes': [
                    models.Index(fields=['status'], name='issues_status_a5f1c2_idx'),
                    models.Index(fields=['-created_at'], name='issues_created_9b3e4d_idx'),
                ],
            },
        ),
    ]
