import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="TicketCategory",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=50, unique=True)),
            ],
            options={
                "ordering": ["name"],
                "verbose_name_plural": "ticket categories",
            },
        ),
        migrations.CreateModel(
            name="BookedTicket",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("total_price", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "ordering": ["id"],
            },
        ),
        migrations.CreateModel(
            name="Ticket",
            fields=[
                ("ticket_code", models.CharField(max_length=20, primary_key=True, serialize=False)),
                ("ticket_name", models.CharField(max_length=100)),
                ("price", models.PositiveIntegerField()),
                ("event_date", models.DateTimeField()),
                ("quota", models.PositiveIntegerField()),
                (
                    "category",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="tickets",
                        to="bookings.ticketcategory",
                    ),
                ),
            ],
            options={
                "ordering": ["ticket_code"],
                "indexes": [models.Index(fields=["event_date"], name="bookings_ticket_event_idx")],
            },
        ),
        migrations.CreateModel(
            name="BookedTicketDetail",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("ticket_code", models.CharField(max_length=20)),
                ("quantity", models.PositiveIntegerField()),
                ("subtotal_price", models.PositiveIntegerField()),
                (
                    "booked_ticket",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="details",
                        to="bookings.bookedticket",
                    ),
                ),
            ],
            options={
                "ordering": ["id"],
                "indexes": [models.Index(fields=["ticket_code"], name="bookings_line_ticket_code_idx")],
                "constraints": [
                    models.UniqueConstraint(fields=("booked_ticket", "ticket_code"), name="unique_ticket_per_booking")
                ],
            },
        ),
    ]
