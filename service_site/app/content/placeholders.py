"""
Bundled placeholder content.

Pages show these records whenever the CMS cannot be reached or has no
published entries for a content type yet.
"""

from typing import Any, Dict, List

from .models import Event, QuickResource, Resource, Story, TeamMember, ValueCard


SITE_NAME = "Beyond Disability Club"

MISSION = (
    "The Beyond Disability Club empowers students by connecting them with "
    "essential services, fostering skill development, and promoting active "
    "community engagement. Our mission is to create an inclusive environment "
    "where every student can thrive, participate fully, and feel supported "
    "both in college and beyond."
)

HOME_STORIES: List[Story] = [
    Story(
        title="Navigating Campus Life with Confidence",
        slug="navigating-campus-life",
        date="2025-03-15T00:00:00",
        category="Tips",
        author_name="Emily Rodriguez",
        excerpt="Discover how our peer mentorship program helps students build independence and succeed academically.",
    ),
    Story(
        title="Technology Tools That Make a Difference",
        slug="technology-tools",
        date="2025-03-10T00:00:00",
        category="Resources",
        author_name="Marcus Thompson",
        excerpt="Explore the assistive technologies available to students and how they enhance learning experiences.",
    ),
    Story(
        title="From Student to Advocate",
        slug="student-to-advocate",
        date="2025-03-05T00:00:00",
        category="Inspiration",
        author_name="Jessica Chen",
        excerpt="Learn how club members are making an impact by raising awareness and promoting inclusion on campus.",
    ),
]

LISTING_STORIES: List[Story] = [
    Story(
        title="Breaking Barriers: How Our Club Changed My College Experience",
        slug="breaking-barriers",
        date="2025-03-18T00:00:00",
        category="Inspiration",
        author_name="Sarah Martinez",
        excerpt=(
            "When I first arrived at GCSC, I felt overwhelmed by the challenges ahead. Finding the "
            "Beyond Disability Club was a turning point in my college journey..."
        ),
        featured=True,
    ),
    Story(
        title="Navigating Campus Life with Confidence",
        slug="navigating-campus-life",
        date="2025-03-15T00:00:00",
        category="Tips",
        author_name="Emily Rodriguez",
        excerpt=(
            "The peer mentorship program helped me build independence and succeed academically. "
            "Here's how connecting with other students made all the difference..."
        ),
    ),
    Story(
        title="Technology Tools That Make a Difference",
        slug="technology-tools",
        date="2025-03-10T00:00:00",
        category="Resources",
        author_name="Marcus Thompson",
        excerpt="Explore the assistive technologies available to students and how they enhance learning experiences.",
    ),
    Story(
        title="From Student to Advocate",
        slug="student-to-advocate",
        date="2025-03-05T00:00:00",
        category="Community",
        author_name="Jessica Chen",
        excerpt="Learn how club members are making an impact by raising awareness and promoting inclusion on campus.",
    ),
]

EVENTS: List[Event] = [
    Event(
        title="Monthly Club Meeting",
        slug="monthly-meeting",
        date="March 25, 2025",
        start_time="5:00 PM",
        end_time="6:30 PM",
        location="Student Center, Room 204",
        description="Join us for our regular meeting to discuss upcoming initiatives and connect with fellow members.",
    ),
    Event(
        title="Accessibility Workshop",
        slug="accessibility-workshop",
        date="April 2, 2025",
        start_time="3:00 PM",
        end_time="5:00 PM",
        location="Library Conference Room",
        description="Learn about assistive technologies and resources available to students on campus.",
    ),
    Event(
        title="Community Awareness Day",
        slug="community-awareness-day",
        date="April 15, 2025",
        start_time="10:00 AM",
        end_time="2:00 PM",
        location="Campus Quad",
        description="Join us for an outdoor event promoting disability awareness and inclusion in our community.",
    ),
]

RESOURCES: List[Resource] = [
    Resource(
        title="GCSC Student Accessibility Services",
        slug="gcsc-accessibility",
        description="On-campus support including accommodations, assistive technology, and academic support.",
        url="#",
        category="On-Campus",
        icon="accessibility",
    ),
    Resource(
        title="Academic Support Center",
        slug="academic-support",
        description="Tutoring, study skills workshops, and academic coaching for all students.",
        url="#",
        category="On-Campus",
        icon="accessibility",
    ),
    Resource(
        title="Bay County Disability Resource Center",
        slug="bay-county-drc",
        description="Local advocacy, information, and referral services for individuals with disabilities.",
        url="#",
        category="Community",
        icon="document",
    ),
    Resource(
        title="ARC of the Bay",
        slug="arc-of-bay",
        description="Community-based services supporting individuals with developmental disabilities.",
        url="#",
        category="Community",
        icon="heart",
    ),
    Resource(
        title="Division of Vocational Rehabilitation",
        slug="dvr",
        description="Statewide employment services, job training, and career development programs.",
        url="#",
        category="Vocational",
        icon="building",
    ),
    Resource(
        title="CareerSource Gulf Coast",
        slug="careersource",
        description="Job placement assistance, resume help, and career counseling services.",
        url="#",
        category="Vocational",
        icon="career",
    ),
]

TEAM_MEMBERS: List[TeamMember] = [
    TeamMember(
        title="Alex Johnson",
        slug="alex-johnson",
        role="Club President",
        bio="Senior majoring in Psychology, passionate about accessibility advocacy.",
    ),
    TeamMember(
        title="Maria Santos",
        slug="maria-santos",
        role="Vice President",
        bio="Junior in Social Work, dedicated to community outreach and support.",
    ),
    TeamMember(
        title="Jordan Lee",
        slug="jordan-lee",
        role="Events Coordinator",
        bio="Sophomore in Education, organizing workshops and awareness events.",
    ),
]

QUICK_RESOURCES: List[QuickResource] = [
    QuickResource(
        title="Student Accessibility Resources",
        description="On-campus support services for students with disabilities",
        icon="accessibility",
    ),
    QuickResource(
        title="Disability Resource Center",
        description="Local community resources and advocacy services",
        icon="document",
    ),
    QuickResource(
        title="Vocational Rehabilitation",
        description="Statewide employment and career development programs",
        icon="building",
    ),
]

VALUES: List[ValueCard] = [
    ValueCard(
        title="Our Mission",
        description=(
            "To empower students by connecting them with essential services, fostering skill "
            "development, and promoting active community engagement."
        ),
        icon="target",
    ),
    ValueCard(
        title="Inclusion",
        description=(
            "Creating an environment where every student can thrive, participate fully, and feel "
            "supported throughout their college journey."
        ),
        icon="users",
    ),
    ValueCard(
        title="Support",
        description=(
            "Building a community of mutual support, understanding, and advocacy for students with "
            "diverse abilities."
        ),
        icon="heart",
    ),
    ValueCard(
        title="Empowerment",
        description=(
            "Helping students develop skills, confidence, and connections that extend beyond the "
            "classroom."
        ),
        icon="sparkles",
    ),
]

CONTACT_DETAILS: Dict[str, Any] = {
    "email": "info@beyonddisability.club",
    "phone": "(850) 555-1234",
    "phone_href": "tel:+18505551234",
    "location": [
        "Gulf Coast State College",
        "5230 W US Highway 98",
        "Panama City, FL 32401",
    ],
}
