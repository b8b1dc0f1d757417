import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Course",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("title", models.CharField(max_length=255)),
            ],
            options={
                "db_table": "courses_course",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="CourseUser",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("role", models.CharField(choices=[("student", "Student"), ("teaching_assistant", "Teaching Assistant"), ("manager", "Manager"), ("owner", "Owner"), ("observer", "Observer")], default="student", max_length=20)),
                ("phantom", models.BooleanField(default=False)),
                ("course", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="course_users", to="courses.course")),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="course_users", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "courses_course_user",
                "constraints": [models.UniqueConstraint(fields=("course", "user"), name="unique_course_user")],
            },
        ),
    ]
