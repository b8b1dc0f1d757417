"""Submission 생성 시 notification 발행."""
from django.db.models.signals import post_save
from django.dispatch import receiver

from apps.domains.submissions.models import Submission
from apps.support.messaging.notifier import AssessmentNotifier


@receiver(post_save, sender=Submission)
def on_submission_created(sender, instance, created, **kwargs):
    if created:
        AssessmentNotifier.assessment_attempted(
            instance.creator,
            instance.assessment,
            course_user=instance.course_user,
        )
