# content.py — static site data (projects, skills, profile) + tab filter
# -----------------------------------------------------------------------
# Everything here is built once at import and never mutated.
# -----------------------------------------------------------------------

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple, Union

Category = Union[str, Tuple[str, ...]]


class ProjectStatus(str, Enum):
    COMPLETED = "Completed"
    LIVE = "Live"
    IN_DEVELOPMENT = "In Development"


@dataclass(frozen=True)
class Project:
    id: int
    title: str
    description: str
    image: str
    tags: Tuple[str, ...]
    github: str
    demo: str
    category: Category
    features: Tuple[str, ...]
    status: ProjectStatus


@dataclass(frozen=True)
class Skill:
    name: str
    level: int  # percent
    icon: str

    def __post_init__(self):
        if not 0 <= self.level <= 100:
            raise ValueError(f"skill level out of range: {self.name}={self.level}")


# -----------------------------
# Site metadata + profile
# -----------------------------
SITE: Dict = {
    "title": "Hemant Rajpurohit - Blockchain Developer & Smart Contract Specialist",
    "description": (
        "Experienced blockchain developer specializing in DeFi, NFTs, and smart contract development. "
        "Building secure, scalable decentralized applications on Ethereum, Sonic, and Solana."
    ),
    "keywords": [
        "blockchain developer", "smart contracts", "DeFi", "NFTs", "Ethereum",
        "Solidity", "Web3", "cryptocurrency", "decentralized applications",
    ],
    "author": "Hemant Rajpurohit",
    "url": "https://hemant-raj.vercel.app",
    "site_name": "Hemant Rajpurohit Portfolio",
    "og_image": "/Picture.jpg",
    "twitter_creator": "@Hemant_Raj_17",
    "locale": "en_US",
}

PROFILE: Dict = {
    "first_name": "Hemant",
    "last_name": "Rajpurohit",
    "badge": "Blockchain Developer & Innovator",
    "headline": "Building the Decentralized Future",
    "tagline": (
        "I create secure, scalable blockchain solutions that bridge the gap between innovative "
        "technology and real-world applications."
    ),
    "about_lead": "Passionate blockchain developer with expertise in building decentralized applications",
    "role": "Full Stack Blockchain Developer",
    "bio": [
        "With over 2 years of experience in blockchain and full stack development, I specialize in creating "
        "secure, efficient smart contracts and decentralized applications that solve real-world problems. "
        "My expertise spans across multiple blockchain platforms including Ethereum, Sonic, and Solana.",
        "I'm passionate about the potential of blockchain technology to revolutionize industries through "
        "decentralization, transparency, and security. My approach combines technical excellence with a deep "
        "understanding of business needs to deliver solutions that drive innovation and adoption.",
    ],
    "location": "Jaipur, Rajasthan",
    "experience": "2+ Years",
    "email": "hemant17052002@gmail.com",
    "portrait": "Picture.jpg",
    "resume": "resume.pdf",
    "resume_download_name": "Hemant_Rajpurohit_Resume.pdf",
    "links": {
        "GitHub": "https://github.com/Hemant-exe",
        "LinkedIn": "https://www.linkedin.com/in/hemant-rajpurohit/",
        "Twitter": "https://x.com/Hemant_Raj_17",
    },
}

# Section anchors, in page order
SECTIONS: Tuple[str, ...] = ("home", "about", "projects", "skills", "resume", "contact")

PLATFORMS: Tuple[str, ...] = ("Ethereum", "Binance Smart Chain", "Sonic", "Solana", "Polygon", "Cosmos")

APPROACH: Tuple[str, ...] = (
    "Security-first development methodology",
    "Gas optimization for efficient contracts",
    "Comprehensive testing and auditing",
    "Cross-chain compatibility design",
    "User-centered interface development",
)

# ---- Projects ----
PROJECTS: Tuple[Project, ...] = (
    Project(
        id=1,
        title="NFT Marketplace",
        description=(
            "A comprehensive NFT marketplace built on Ethereum with advanced features including multi-blockchain "
            "support, automated royalty distribution, and gas-optimized smart contracts. Features include batch "
            "minting, lazy minting, and integration with IPFS for decentralized storage."
        ),
        image="NFT2.png",
        tags=("Next.js", "Solidity", "IPFS", "Ethereum", "Web3.js"),
        github="https://github.com/Hemant-exe/NFT_MarketPlace",
        demo="https://github.com/Hemant-exe/NFT_MarketPlace",
        category="nft",
        features=("Multi-blockchain support", "Royalty automation", "Gas optimization", "IPFS integration"),
        status=ProjectStatus.COMPLETED,
    ),
    Project(
        id=2,
        title="VeraLove Dating Platform",
        description=(
            "A revolutionary decentralized dating platform that leverages blockchain technology to ensure user "
            "privacy and authenticity. Features include verified profiles, secure messaging, and token-based "
            "premium features with smart contract-based matching algorithms."
        ),
        image="Dating.png",
        tags=("Solidity", "React", "Web3.js", "Ethereum", "Privacy"),
        github="https://github.com/Hemant-exe/VeraLove-Platform",
        demo="https://veralove-dating.vercel.app",
        category=("Dating", "nft"),
        features=("Privacy-first design", "Smart contract matching", "Token-based features", "Verified profiles"),
        status=ProjectStatus.IN_DEVELOPMENT,
    ),
    Project(
        id=3,
        title="Just Cats Crowdfunding",
        description=(
            "A decentralized crowdfunding platform built for a client, enabling transparent and secure "
            "fundraising campaigns. Features include milestone-based funding, automated refunds, and community "
            "governance through DAO mechanisms."
        ),
        image="JustCats.png",
        tags=("Solidity", "React", "Ethereum", "DAO", "Crowdfunding"),
        github="https://github.com/Hemant-exe/JustCats-Crowdfunding",
        demo="https://justcats.tv",
        category="Crowd Funding",
        features=("Milestone funding", "DAO governance", "Automated refunds", "Transparent tracking"),
        status=ProjectStatus.LIVE,
    ),
    Project(
        id=4,
        title="Ajna Protocol Security Audit",
        description=(
            "Comprehensive security audit and testing of Ajna Protocol's smart contracts as part of B.Tech final "
            "project. Conducted formal verification using Certora, unit testing, and integration testing to "
            "ensure protocol security and identify potential vulnerabilities."
        ),
        image="Ajna.png",
        tags=("Solidity", "Testing", "Certora", "Unit Testing", "Security"),
        github="https://github.com/Hemant-exe/Ajna-Protocol-Audit",
        demo="https://ajna.finance",
        category="defi",
        features=("Formal verification", "Vulnerability assessment", "Gas optimization", "Documentation"),
        status=ProjectStatus.COMPLETED,
    ),
)

# ---- Skills ----
SKILLS: Tuple[Skill, ...] = (
    Skill("Solidity", 95, "code"),
    Skill("Smart Contract Development", 90, "lock"),
    Skill("Node.js", 75, "code"),
    Skill("JavaScript", 85, "cpu"),
    Skill("TypeScript", 80, "code"),
    Skill("Java", 90, "code"),
    Skill("SQL", 95, "database"),
    Skill("Web3.js / Ethers.js", 85, "code"),
    Skill("Hardhat / Foundry", 90, "globe"),
    Skill("React / Next.js", 90, "code"),
    Skill("DeFi Protocols", 80, "database"),
    Skill("Blockchain Architecture", 85, "server"),
    Skill("Cryptography", 75, "lock"),
    Skill("Rust", 70, "cpu"),
)

SKILL_ICONS: Dict[str, str] = {
    "code": "💻", "lock": "🔒", "cpu": "🧠", "database": "🗄️", "globe": "🌐", "server": "🖥️",
}


# -----------------------------
# Tab filter
# -----------------------------
ALL = "all"

PROJECT_TABS: Tuple[Tuple[str, str], ...] = (
    (ALL, "All Projects"),
    ("defi", "DeFi"),
    ("nft", "NFTs"),
    ("Crowd Funding", "Crowd Funding"),
    ("Dating", "Dating"),
)


def has_category(project: Project, category: str) -> bool:
    """List categories test membership, single categories test equality."""
    if isinstance(project.category, (tuple, list)):
        return category in project.category
    return project.category == category


def filter_projects(projects: Iterable[Project], category: str) -> List[Project]:
    if category == ALL:
        return list(projects)
    return [p for p in projects if has_category(p, category)]


def get_project(project_id: int) -> Optional[Project]:
    return next((p for p in PROJECTS if p.id == project_id), None)
