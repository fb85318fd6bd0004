from django.db import migrations, models
import django.db.models.deletion
import unilabel.fields


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('unilabel', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Accordion',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('showintro', models.BooleanField(default=False)),
                ('unilabel', models.OneToOneField(db_column='unilabelid', on_delete=django.db.models.deletion.CASCADE, related_name='accordion', to='unilabel.unilabel')),
            ],
            options={
                'db_table': 'unilabeltype_accordion',
            },
        ),
        migrations.CreateModel(
            name='AccordionSegment',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('heading', unilabel.fields.SafeHTMLField(blank=True, config_name='heading')),
                ('content', unilabel.fields.SafeHTMLField(blank=True)),
                ('accordion', models.ForeignKey(db_column='accordionid', on_delete=django.db.models.deletion.CASCADE, related_name='segments', to='accordion.accordion')),
            ],
            options={
                'db_table': 'unilabeltype_accordion_seg',
                'ordering': ('id',),
            },
        ),
    ]
