from __future__ import annotations

from profile_composer.assembler import ProfileContent
from profile_composer.core import (
    ContactLink,
    Education,
    Experience,
    ImpactMetric,
    ProfileHeader,
    Skill,
    Spotlight,
)

HEADER = ProfileHeader(
    name="Andrew Li",
    initials="AL",
    headline="Software Engineer 2",
    organization="Microsoft - C + AI Silver - Azure Gov Tooling",
    tagline="6+ Years Experience | Full-Stack Development | Azure Cloud",
    contacts=(
        ContactLink(label="Contact", icon_tag="email"),
        ContactLink(label="LinkedIn", icon_tag="linkedin"),
        ContactLink(label="GitHub", icon_tag="github"),
    ),
)

SUMMARY = (
    "Software Engineer at Microsoft with 6 years of professional experience developing "
    "scalable Single Page Applications using React.js, building RESTful APIs with .NET (C#), "
    "and optimizing cloud deployments. Extensive experience in ELT pipelines, transforming "
    "trillions of records into actionable insights for monthly reports submitted to the U.S. government."
)

SKILLS = (
    # Frontend
    Skill("React.js", "Frontend"),
    Skill("TypeScript", "Frontend"),
    Skill("JavaScript", "Frontend"),
    Skill("HTML5/CSS", "Frontend"),
    Skill("React Redux", "Frontend"),
    # Backend
    Skill("C#/.NET", "Backend"),
    Skill("Java", "Backend"),
    Skill("REST APIs", "Backend"),
    Skill("PostgreSQL", "Backend"),
    Skill("Python", "Backend"),
    # Cloud
    Skill("Azure Portal", "Cloud"),
    Skill("ARM Templates", "Cloud"),
    # Data
    Skill("Azure Synapse", "Data"),
    Skill("Azure Data Factory", "Data"),
)

EDUCATION = Education(
    degree="B.S. Mathematics & Computer Science",
    institution="University of California San Diego",
    location="La Jolla, CA",
    year="2019",
)

SPOTLIGHT = Spotlight(
    title="Azure ConMon Project Spotlight",
    description=(
        "Led the complete migration of the legacy Azure ConMon (FedRAMP Continuous Monitoring) system "
        "to a modernized compliance web application. This critical government system processes trillions "
        "of records from 25+ data sources, streamlining U.S. government report submissions and enhancing "
        "security compliance across multiple Azure clouds."
    ),
    impact=(
        ImpactMetric("Monthly Cost Reduction", "$25K+", "attach-money"),
        ImpactMetric("Hours Saved Monthly", "120+", "security"),
        ImpactMetric("Performance Improvement", "95%", "trending-up"),
    ),
)

EXPERIENCES = (
    Experience(
        title="Software Engineer 2",
        organization="Microsoft - C + AI Silver - Azure Gov Tooling",
        period="Nov 2021 - Present",
        location="Redmond, WA",
        description=(
            "Leading development of critical government compliance applications including "
            "Azure ConMon and Microsoft Personnel systems."
        ),
        achievements=(
            "Led migration of legacy Azure ConMon (FedRAMP Continuous Monitoring) to modernized web application across multiple clouds",
            "Reduced monthly operational costs by $25,000+ through system modernization and optimization",
            "Streamlined POAM report preparation, cutting 120+ hours per month for U.S. government submissions",
            "Integrated M365 data reducing manual effort by 40+ hours per month",
            "Delivered ConMon Resiliency Feature reducing resolution time from 2 hours to 15 minutes",
            "Achieved 75% reduction in ICMS incidents for Microsoft Personnel application",
            "Optimized rendering performance reducing unnecessary re-renders by 95%",
        ),
        technologies=("React.js", "TypeScript", "C#", "Azure Synapse", "Azure Data Factory", "ARM Templates"),
    ),
    Experience(
        title="Software Engineer 2",
        organization="Northrop Grumman - Mission Systems",
        period="July 2020 - Oct 2021",
        location="San Diego, CA",
        description=(
            "Developed features for JP2008 SATCOM web application focusing on full-stack "
            "development and code quality."
        ),
        achievements=(
            "Developed and delivered features for JP2008 SATCOM web application",
            "Built RESTful APIs for PostgreSQL database using .NET C#",
            "Optimized query performance with SQL views",
            "Established React.js/JavaScript style guide using VS Code and ESLint",
            "Created library of reusable UI components to enhance development efficiency",
        ),
        technologies=("React.js", "JavaScript", "C#", "PostgreSQL", ".NET", "Visual Studio"),
    ),
    Experience(
        title="Software Engineer 1",
        organization="BAE Systems - Electronic Systems Sector",
        period="June 2019 - July 2020",
        location="San Diego, CA",
        description=(
            "Developed major features for MAFPS web application with focus on performance "
            "optimization and testing."
        ),
        achievements=(
            "Developed major features for MAFPS (Mobility Air Forces Automated Flight Planning Service)",
            "Improved feature performance by ~10% through memory and performance analysis",
            "Increased test coverage from 68% to 83% using Enzyme unit tests",
            "Participated in Agile Kanban development and customer design meetings",
            "Integrated open-source components to accelerate development",
        ),
        technologies=("React.js", "JavaScript", "React Redux", "Enzyme", "Jest"),
    ),
)

CONTENT = ProfileContent(
    header=HEADER,
    summary=SUMMARY,
    skills=SKILLS,
    education=EDUCATION,
    experiences=EXPERIENCES,
    spotlight=SPOTLIGHT,
)
