"""Job listings the board starts with before the first scrape.

These are entered by hand rather than acquired, so they carry
``scraped=False``, their own match scores, and any status and contacts
already recorded for them.
"""
from __future__ import annotations

from datetime import datetime, timezone

from jobassist.models import Contact, JobPosting, JobStatus, Source


def _posted(value: str) -> datetime:
    return datetime.fromisoformat(value).replace(tzinfo=timezone.utc)


def _contact(name: str, position: str, company: str, handle: str) -> Contact:
    return Contact(name, position, company, f"https://linkedin.com/in/{handle}")


def seed_postings() -> list[JobPosting]:
    """Fresh copies on every call; the board mutates what it holds."""
    return [
        JobPosting(
            id="1",
            title="Senior Frontend Developer",
            company="TechCorp Solutions",
            location="Dubai, UAE",
            description="We are looking for a Senior Frontend Developer to join our dynamic team. "
            "The ideal candidate will have strong experience with React, TypeScript, and modern frontend frameworks.",
            requirements=[
                "5+ years of experience with React and TypeScript",
                "Experience with state management libraries (Redux, Zustand)",
                "Strong knowledge of modern CSS and design systems",
                "Experience with responsive design and cross-browser compatibility",
                "Familiarity with testing frameworks",
            ],
            url="https://www.linkedin.com/jobs/view/12345",
            source=Source.LINKEDIN,
            posted_date=_posted("2023-04-18T10:00:00"),
            match_score=92,
            category="Software Development",
            contacts=[
                _contact("Sarah Johnson", "Engineering Manager", "TechCorp Solutions", "sarah-johnson"),
                _contact("Ahmed Hassan", "Senior Developer", "TechCorp Solutions", "ahmed-hassan"),
            ],
            scraped=False,
        ),
        JobPosting(
            id="2",
            title="Product Manager - FinTech",
            company="Financial Innovations Ltd",
            location="Remote (MENA Region)",
            description="Financial Innovations is seeking a Product Manager to lead our FinTech solutions. "
            "You'll work closely with engineering, design, and business teams to deliver innovative financial products.",
            requirements=[
                "3+ years of product management experience in FinTech",
                "Strong understanding of financial services industry",
                "Experience with Agile methodologies",
                "Excellent communication and stakeholder management",
            ],
            url="https://www.naukrigulf.com/jobs/12346",
            source=Source.NAUKRIGULF,
            posted_date=_posted("2023-04-17T14:30:00"),
            match_score=85,
            category="Product Management",
            contacts=[
                _contact("Michael Roberts", "Head of Product", "Financial Innovations Ltd", "michael-roberts"),
            ],
            scraped=False,
        ),
        JobPosting(
            id="3",
            title="Data Scientist",
            company="Analytics Pro",
            location="Abu Dhabi, UAE",
            description="Join our data science team to develop advanced analytics solutions for enterprise clients. "
            "You'll work on machine learning models and big data processing.",
            requirements=[
                "MS or PhD in Computer Science, Statistics, or related field",
                "Experience with Python, R, and data processing libraries",
                "Knowledge of machine learning algorithms and statistical modeling",
                "Experience with big data technologies (Hadoop, Spark)",
            ],
            url="https://www.linkedin.com/jobs/view/12347",
            source=Source.LINKEDIN,
            posted_date=_posted("2023-04-16T09:15:00"),
            match_score=78,
            category="Data Science",
            scraped=False,
        ),
        JobPosting(
            id="4",
            title="UX/UI Designer",
            company="Creative Digital Agency",
            location="Dubai, UAE",
            description="We're looking for a talented UX/UI Designer to create visually appealing and "
            "user-friendly digital experiences for our clients in various industries.",
            requirements=[
                "Portfolio showcasing web and mobile app designs",
                "Proficiency with design tools (Figma, Adobe XD)",
                "Experience with user research and usability testing",
                "Understanding of design systems and component libraries",
            ],
            url="https://www.linkedin.com/jobs/view/12348",
            source=Source.LINKEDIN,
            posted_date=_posted("2023-04-15T11:45:00"),
            match_score=82,
            category="UX/UI Design",
            contacts=[
                _contact("Jessica Chen", "Design Director", "Creative Digital Agency", "jessica-chen"),
            ],
            scraped=False,
        ),
        JobPosting(
            id="5",
            title="DevOps Engineer",
            company="Cloud Solutions Inc",
            location="Remote",
            description="Join our DevOps team to build and maintain cloud infrastructure, implement CI/CD "
            "pipelines, and ensure system reliability for our enterprise clients.",
            requirements=[
                "Experience with AWS, Azure, or GCP",
                "Knowledge of containerization (Docker, Kubernetes)",
                "Experience with Infrastructure as Code (Terraform, CloudFormation)",
                "Understanding of CI/CD principles and tools",
            ],
            url="https://www.naukrigulf.com/jobs/12349",
            source=Source.NAUKRIGULF,
            posted_date=_posted("2023-04-14T15:20:00"),
            match_score=75,
            category="Software Development",
            status=JobStatus.VIEWED,
            scraped=False,
        ),
        JobPosting(
            id="6",
            title="Digital Marketing Manager",
            company="EcomGrowth",
            location="Riyadh, Saudi Arabia",
            description="EcomGrowth is seeking a Digital Marketing Manager to lead our marketing strategies "
            "and drive customer acquisition across digital channels.",
            requirements=[
                "5+ years of digital marketing experience",
                "Experience with SEO, SEM, and social media marketing",
                "Strong analytical skills and experience with marketing analytics tools",
                "Understanding of conversion optimization and funnel management",
            ],
            url="https://www.linkedin.com/jobs/view/12350",
            source=Source.LINKEDIN,
            posted_date=_posted("2023-04-13T08:15:00"),
            match_score=70,
            category="Marketing",
            contacts=[
                _contact("Omar Al-Jabri", "Head of Growth", "EcomGrowth", "omar-aljabri"),
            ],
            status=JobStatus.VIEWED,
            scraped=False,
        ),
        JobPosting(
            id="7",
            title="Mobile App Developer (React Native)",
            company="TechMobile Solutions",
            location="Dubai, UAE",
            description="We're looking for a React Native developer to build cross-platform mobile "
            "applications for our clients in various industries.",
            requirements=[
                "3+ years of experience with React Native",
                "Experience with state management in React Native apps",
                "Knowledge of native modules integration",
                "Experience with app deployment to App Store and Google Play",
            ],
            url="https://www.naukrigulf.com/jobs/12351",
            source=Source.NAUKRIGULF,
            posted_date=_posted("2023-04-12T14:30:00"),
            match_score=88,
            category="Software Development",
            status=JobStatus.APPLIED,
            scraped=False,
        ),
        JobPosting(
            id="8",
            title="Data Analyst",
            company="DataInsights LLC",
            location="Remote",
            description="Join our team as a Data Analyst to help extract, analyze, and visualize data "
            "to drive business decisions for our clients.",
            requirements=[
                "Experience with SQL and data querying",
                "Proficiency with data visualization tools (Tableau, Power BI)",
                "Strong Excel skills",
                "Experience with statistical analysis",
            ],
            url="https://www.linkedin.com/jobs/view/12352",
            source=Source.LINKEDIN,
            posted_date=_posted("2023-04-11T09:45:00"),
            match_score=80,
            category="Data Science",
            contacts=[
                _contact("Priya Sharma", "Analytics Lead", "DataInsights LLC", "priya-sharma"),
            ],
            status=JobStatus.INTERVIEW,
            scraped=False,
        ),
        JobPosting(
            id="9",
            title="Product Designer",
            company="InnovateTech",
            location="Abu Dhabi, UAE",
            description="InnovateTech is looking for a Product Designer to create intuitive and beautiful "
            "digital products that solve real user problems.",
            requirements=[
                "Portfolio showcasing end-to-end product design work",
                "Experience with design systems and component libraries",
                "User research and testing experience",
                "Understanding of accessibility standards",
            ],
            url="https://www.naukrigulf.com/jobs/12353",
            source=Source.NAUKRIGULF,
            posted_date=_posted("2023-04-10T11:20:00"),
            match_score=85,
            category="UX/UI Design",
            scraped=False,
        ),
        JobPosting(
            id="10",
            title="Technical Product Manager",
            company="SaaS Platform Inc",
            location="Remote",
            description="Join our product team to lead the development of our SaaS platform, working closely "
            "with engineering, design, and business stakeholders.",
            requirements=[
                "3+ years of product management experience for technical products",
                "Strong understanding of software development lifecycle",
                "Experience with Agile methodologies",
                "Technical background or understanding of software engineering principles",
            ],
            url="https://www.linkedin.com/jobs/view/12354",
            source=Source.LINKEDIN,
            posted_date=_posted("2023-04-09T10:15:00"),
            match_score=90,
            category="Product Management",
            contacts=[
                _contact("David Miller", "VP of Product", "SaaS Platform Inc", "david-miller"),
                _contact("Sophia Wang", "Senior Product Manager", "SaaS Platform Inc", "sophia-wang"),
            ],
            status=JobStatus.OFFER,
            scraped=False,
        ),
    ]
