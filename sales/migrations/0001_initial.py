import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('inventory', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Transaction',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('quantity', models.IntegerField()),
                ('charged_price', models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                ('type', models.CharField(choices=[('SALE', 'Sale'), ('PURCHASE', 'Purchase')], db_index=True, default='SALE', max_length=20)),
                ('timestamp', models.DateField(db_index=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('product', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='transactions', to='inventory.product')),
            ],
            options={
                'ordering': ['-timestamp', '-id'],
            },
        ),
    ]
