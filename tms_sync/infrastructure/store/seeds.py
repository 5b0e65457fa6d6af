# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Seed documents for an empty file store.

Each collection is seeded only when its file does not exist yet, so
edits made afterwards survive restarts. Documents are stored in their
camelCase wire form.
"""

from typing import Any

SEED_LEARNERS: list[dict[str, Any]] = [
    {
        "name": "Alice Tan",
        "email": "alice@example.com",
        "tel": "91234567",
        "company": "Acme Pte Ltd",
        "progressPercent": 0,
        "quizScore": None,
        "paymentStatus": "Pending",
        "assessmentGrades": [],
        "submissions": [],
        "grantId": None,
        "grantStatus": "N/A",
        "claimId": None,
        "claimStatus": "N/A",
        "gender": "Female",
        "dob": "1985-03-14",
        "courseSponsorship": "Employer-Sponsored",
        "ethnicity": "Chinese",
        "completedSubtopics": [],
        "nationality": "Singaporean",
        "employmentStatus": "Employed",
    },
    {
        "name": "Bala Kumar",
        "email": "bala@example.com",
        "tel": "98765432",
        "company": "Self-employed",
        "progressPercent": 0,
        "quizScore": None,
        "paymentStatus": "Unpaid",
        "assessmentGrades": [],
        "submissions": [],
        "grantId": None,
        "grantStatus": "N/A",
        "claimId": None,
        "claimStatus": "N/A",
        "gender": "Male",
        "dob": "1999-11-02",
        "courseSponsorship": "Self-Sponsored",
        "ethnicity": "Indian",
        "completedSubtopics": [],
        "nationality": "Singapore PR",
        "employmentStatus": "Looking for Job",
    },
]

SEED_COURSES: list[dict[str, Any]] = [
    {
        "id": "course_data_analytics",
        "title": "Data Analytics with Python",
        "courseCode": "TGS-2024001234",
        "tscTitle": "Data Analytics",
        "tscCode": "ICT-DIT-3002-1.1",
        "tscKnowledge": "Statistical methods; data visualisation",
        "tscAbilities": "Clean, analyse and present datasets",
        "courseRunId": "RUN-0001",
        "learningOutcomes": "Analyse tabular data and communicate findings.",
        "trainer": "John Smith",
        "trainingHours": 20,
        "assessmentHours": 4,
        "difficulty": "Intermediate",
        "modeOfLearning": ["Physical", "Virtual"],
        "courseType": "WSQ",
        "enrollmentStatus": "not-enrolled",
        "topics": [
            {
                "id": "t1",
                "title": "Foundations",
                "subtopics": [
                    {"id": "st1", "title": "Tabular data", "content": "Rows, columns and types."},
                    {"id": "st2", "title": "Cleaning", "content": "Missing values and outliers."},
                ],
            },
            {
                "id": "t2",
                "title": "Presenting results",
                "subtopics": [
                    {"id": "st3", "title": "Charts", "content": "Choosing the right chart."},
                ],
            },
        ],
        "learners": [],
        "status": "Published",
        "courseFee": 1200,
        "taxPercent": 9,
        "isWsqFunded": True,
        "isSkillsFutureEligible": True,
        "isPseaEligible": False,
        "isMcesEligible": True,
        "isIbfFunded": False,
        "isUtapEligible": True,
        "bookmarkedSubtopics": [],
        "assessments": [
            {"id": "a1", "title": "Written assessment", "category": "Written Exam", "status": "Published"},
            {"id": "a2", "title": "Practical assessment", "category": "Practical Exam", "status": "Draft"},
        ],
        "startDate": "2025-03-03",
        "endDate": "2025-03-07",
        "classStatus": "Confirmed",
        "paymentStatus": "Pending",
    },
    {
        "id": "course_agile_foundations",
        "title": "Agile Project Foundations",
        "courseCode": "TGS-2024005678",
        "tscTitle": "Project Management",
        "tscCode": "ICT-PMT-3001-1.1",
        "tscKnowledge": "Iterative delivery",
        "tscAbilities": "Plan and run sprints",
        "courseRunId": "RUN-0002",
        "learningOutcomes": "Run a team through an agile delivery cycle.",
        "trainer": "Mary Lim",
        "trainingHours": 14,
        "assessmentHours": 2,
        "difficulty": "Beginner",
        "modeOfLearning": ["Hybrid"],
        "courseType": "non-WSQ",
        "enrollmentStatus": "not-enrolled",
        "topics": [],
        "learners": [],
        "status": "Draft",
        "courseFee": 800,
        "taxPercent": 9,
        "isWsqFunded": False,
        "isSkillsFutureEligible": True,
        "isPseaEligible": False,
        "isMcesEligible": False,
        "isIbfFunded": False,
        "isUtapEligible": False,
        "bookmarkedSubtopics": [],
        "assessments": [],
        "startDate": "2025-04-14",
        "endDate": "2025-04-15",
        "classStatus": "Pending",
        "paymentStatus": "Pending",
    },
]

SEED_CALENDAR_EVENTS: list[dict[str, Any]] = [
    {"id": 1, "title": "Data Analytics: Written assessment", "date": "2025-03-07", "type": "quiz"},
    {"id": 2, "title": "Agile kickoff lecture", "date": "2025-04-14", "type": "lecture", "speaker": "Mary Lim"},
    {"id": 3, "title": "Industry networking night", "date": "2025-04-30", "type": "event", "eventType": "Networking"},
]

SEED_GRANT_APPLICATIONS: list[dict[str, Any]] = [
    {
        "id": "grant_001",
        "courseId": "course_data_analytics",
        "courseTitle": "Data Analytics with Python",
        "trainer": "John Smith",
        "reason": "Course run for retrenched workers.",
        "status": "Pending",
    },
    {
        "id": "grant_002",
        "courseId": "course_agile_foundations",
        "courseTitle": "Agile Project Foundations",
        "trainer": "Mary Lim",
        "reason": "SME upskilling cohort.",
        "status": "Approved",
    },
]

SEED_JOB_POSTINGS: list[dict[str, Any]] = [
    {
        "id": "job_001",
        "title": "Junior Data Analyst",
        "company": "Acme Pte Ltd",
        "location": "Singapore",
        "salaryMin": 3800,
        "salaryMax": 4800,
        "area": "Data",
        "description": "Build weekly operational dashboards.",
        "url": "https://jobs.example.com/job_001",
    },
]
