from django.db import migrations, models
import unilabel.fields


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Unilabel',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255)),
                ('intro', unilabel.fields.SafeHTMLField(blank=True)),
                ('unilabeltype', models.CharField(default='accordion', max_length=50)),
                ('timemodified', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'unilabel',
            },
        ),
    ]
