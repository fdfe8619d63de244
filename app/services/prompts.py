"""Prompt builders for AI content generation.

One builder per content type, each returning ``(system_instruction,
user_prompt)``. The system instruction pins the JSON shape; the user prompt is
the caller's free text plus one sentence per flag that is set.
"""
from typing import Callable, Dict, List, Tuple
import json

from app.schemas.generation import (
    AdvertisingTemplateRequest,
    ArticleRequest,
    DsaCompanyRequest,
    DsaProblemRequest,
    DsaSheetRequest,
    DsaTopicRequest,
    InternshipRequest,
    JobRequest,
    PortfolioWebsiteRequest,
    RoadmapRequest,
    ScholarshipRequest,
)

PromptPair = Tuple[str, str]


def _join(parts: List[str]) -> str:
    return " ".join(p for p in parts if p)


def job_prompts(request) -> PromptPair:
    kind = "internship" if request.type == "internship" else "job"
    d = request.details
    system = f"""You are an expert {kind} posting creator with access to real-time web data. Generate a comprehensive, realistic {kind} posting based on current market trends in India. Include genuine company information, competitive salary ranges, and authentic requirements. Generate visual assets when requested. Respond with JSON in this exact format: {{
  "title": "string",
  "company": "string",
  "location": "string",
  "salaryRange": "string",
  "jobType": "string",
  "experienceLevel": "string",
  "description": "string",
  "requirements": "string",
  "responsibilities": "string",
  "benefits": "string",
  "skills": ["string"],
  "companyWebsite": "string",
  "applicationUrl": "string",
  "companyLogo": "string (use https://logo.clearbit.com/[company-domain] format or real company logo URL)",
  "generatedImages": ["string (relevant job/company images)"],
  "workflowImages": ["string (workflow diagram URLs)"],
  "mindmapImages": ["string (skills mindmap URLs)"],
  "isAIGenerated": true
}}"""

    parts = [f"Generate a realistic {kind} posting for: {request.prompt}."]
    if d.location:
        parts.append(f"Location focus: {d.location}.")
    else:
        parts.append("Focus on opportunities in India (major cities like Bangalore, Mumbai, Delhi, Hyderabad, Pune).")
    if d.company:
        parts.append(f"Company: {d.company}.")
    if d.role:
        parts.append(f"Role: {d.role}.")
    if d.requirements:
        parts.append(f"Key requirements: {d.requirements}.")
    if d.fetchFromWeb:
        parts.append("Create realistic content based on current market trends and actual company practices in India.")
    if d.includeCompanyLogo:
        parts.append("Include a realistic company logo URL using https://logo.clearbit.com/[company-domain] format for real companies.")
    if d.generateImages:
        parts.append("Generate relevant images for the job posting, company culture, and work environment.")
    if d.generateWorkflows:
        parts.append("Create workflow diagrams showing the application process and typical day-to-day work activities.")
    if d.generateMindmap:
        parts.append("Generate skill mindmaps showing required technical and soft skills with visual connections.")
    if d.includeAnimations:
        parts.append("Include suggestions for interactive animations and transitions for the job posting display.")
    parts.append("Ensure all details are authentic and competitive for the Indian job market.")
    return system, _join(parts)


def article_prompts(request: ArticleRequest) -> PromptPair:
    d = request.details
    system = """You are an expert technical writer with access to current tech trends and real-world insights. Generate comprehensive, up-to-date articles with authentic content based on current industry practices. Focus on Indian tech ecosystem when relevant. Include relevant high-quality image URLs. Respond with JSON in this exact format: {
  "title": "string",
  "content": "string (markdown format, comprehensive with code examples if relevant)",
  "excerpt": "string",
  "author": "string (realistic tech writer name)",
  "category": "string",
  "tags": ["string"],
  "readTime": number,
  "featuredImage": "string (use Unsplash URLs like https://images.unsplash.com/photo-[id]?w=800&h=400&fit=crop or relevant tech images)"
}"""

    parts = [f"Generate a comprehensive, current technical article about: {request.prompt}."]
    if d.fetchFromWeb:
        parts.append("Base the content on current industry trends, latest best practices, and real-world examples from the Indian and global tech industry.")
    if d.category:
        parts.append(f"Category: {d.category}.")
    parts.append("Include practical examples, code snippets where relevant, actionable insights, and appropriate featured images from Unsplash that match the article topic.")
    return system, _join(parts)


def roadmap_prompts(request: RoadmapRequest) -> PromptPair:
    d = request.details
    system = """You are an expert learning path creator with deep knowledge of current industry requirements and technologies popular in India. Generate comprehensive, practical learning roadmaps aligned with current job market demands. Include relevant visual roadmap images and flowchart structure. Respond with JSON in this exact format: {
  "title": "string",
  "description": "string (detailed description)",
  "content": "string (markdown format with comprehensive content)",
  "difficulty": "string (beginner, intermediate, or advanced)",
  "estimatedTime": "string",
  "educationLevel": "string (upto-10th, 12th, btech, degree, postgrad, or professional)",
  "technologies": ["string"],
  "steps": [{"title": "string", "description": "string", "resources": ["string"]}],
  "image": "string (use learning/tech roadmap images from Unsplash like https://images.unsplash.com/photo-[id]?w=600&h=400&fit=crop)",
  "flowchartData": {
    "nodes": [{"id": "string", "type": "string", "position": {"x": number, "y": number}, "data": {"label": "string", "description": "string", "redirectUrl": "string", "color": "string"}}],
    "edges": [{"id": "string", "source": "string (an existing node id)", "target": "string (an existing node id)", "type": "smoothstep", "animated": true}]
  }
}"""

    parts = [
        f"Generate a comprehensive, industry-aligned learning roadmap for: {request.prompt}.",
        "The flowchart must have 20-30 interconnected nodes progressing Basics -> Fundamentals -> Intermediate -> Advanced -> Projects -> Mastery,"
        " with a milestone node every 5-7 nodes, a redirectUrl to a quality learning resource on every node,"
        " and colors #4CAF50 (beginner), #FF9800 (intermediate), #F44336 (advanced), #9C27B0 (projects).",
    ]
    if d.fetchFromWeb:
        parts.append("Base the roadmap on current industry requirements, popular technologies in Indian tech companies, and latest market trends.")
    if d.difficulty:
        parts.append(f"Difficulty: {d.difficulty}.")
    if d.educationLevel:
        parts.append(f"Target education level: {d.educationLevel}.")
    parts.append("Include real-world projects, relevant resources, career-focused learning path suitable for Indian job market, and appropriate roadmap visualization images.")
    return system, _join(parts)


def dsa_problem_prompts(request: DsaProblemRequest) -> PromptPair:
    d = request.details
    system = """You are an expert DSA problem creator with knowledge of interview patterns at top Indian and global tech companies. Generate comprehensive DSA problems similar to those asked in real interviews. Focus on companies with significant presence in India. Respond with JSON in this exact format: {
  "title": "string",
  "description": "string",
  "difficulty": "string (easy, medium, or hard)",
  "category": "string",
  "solution": "string (with detailed code examples and explanations)",
  "hints": ["string"],
  "timeComplexity": "string",
  "spaceComplexity": "string",
  "tags": ["string"],
  "companies": ["string (include Indian and global companies)"]
}"""

    parts = [f"Generate a realistic DSA problem for: {request.prompt}."]
    if d.fetchFromWeb:
        parts.append("Base the problem on actual interview questions asked at top tech companies in India like TCS, Infosys, Wipro, Flipkart, Zomato, as well as global companies with Indian offices.")
    if d.difficulty:
        parts.append(f"Difficulty: {d.difficulty}.")
    if d.category:
        parts.append(f"Category: {d.category}.")
    parts.append("Include multiple solution approaches, edge cases, and detailed explanations.")
    return system, _join(parts)


def dsa_topic_prompts(request: DsaTopicRequest) -> PromptPair:
    system = """You are an expert DSA educator. Create a comprehensive DSA topic covering its key concepts, an estimated problem count, learning resources and common problem patterns.

Return JSON with: name, description, difficulty (beginner/intermediate/advanced), problemCount (number), concepts (array of strings), resources (array of strings)"""
    return system, f"Generate a comprehensive DSA topic about: {request.prompt}."


def dsa_company_prompts(request: DsaCompanyRequest) -> PromptPair:
    d = request.details
    system = """You are an expert on company interview patterns. Create a company profile for DSA preparation covering interview difficulty, common problem categories, problem count, preparation tips and recent interview patterns.

Return JSON with: name, description, logo (placeholder URL), problemCount (number), difficulty, categories (array of strings), tips (array of strings)"""
    parts = [f"Generate a DSA preparation profile for the company: {request.prompt}."]
    if d.difficulty:
        parts.append(f"Focus on {d.difficulty} level interviews.")
    if d.category:
        parts.append(f"Common categories include: {d.category}.")
    return system, _join(parts)


def dsa_sheet_prompts(request: DsaSheetRequest) -> PromptPair:
    d = request.details
    system = """You are an expert DSA sheet curator. Create a comprehensive problem sheet with a target difficulty, creator name, problem selection strategy, estimated problem count and learning path.

Return JSON with: name, description, creator, type (official/public/community), problemCount (number), difficulty, topics (array of strings), learningPath (string)"""
    parts = [f'Generate a DSA problem sheet named: "{request.prompt}".']
    if d.difficulty:
        parts.append(f"Target difficulty: {d.difficulty}.")
    if d.category:
        parts.append(f"Topics covered: {d.category}.")
    return system, _join(parts)


def portfolio_website_prompts(request: PortfolioWebsiteRequest) -> PromptPair:
    d = request.details
    system = """You are an expert web developer and designer specializing in creating stunning, professional portfolio websites. Generate complete, modern portfolio websites with HTML, CSS, and JavaScript. Include responsive design, animations, and professional styling. When enhanced features are requested, integrate real data, generate relevant images, create visual assets, and implement advanced functionality. Respond with JSON in this exact format: {
  "portfolioData": {
    "name": "string",
    "title": "string",
    "bio": "string",
    "skills": ["string"],
    "projects": [{"title": "string", "description": "string", "technologies": ["string"], "demoUrl": "string", "githubUrl": "string"}],
    "experience": [{"title": "string", "company": "string", "duration": "string", "description": "string"}],
    "education": [{"degree": "string", "institution": "string", "year": "string"}]
  },
  "portfolioCode": {
    "html": "string (complete responsive HTML with modern structure)",
    "css": "string (complete CSS with animations, gradients, modern styling)",
    "js": "string (complete JavaScript with animations, interactions)"
  },
  "generatedAssets": {
    "profileImage": "string (professional headshot URL from Unsplash)",
    "projectImages": ["string (project screenshot URLs)"],
    "companyLogos": ["string (company logo URLs)"],
    "skillIcons": ["string (skill icon URLs)"],
    "backgroundImages": ["string (hero/section background URLs)"]
  },
  "animations": {
    "heroAnimations": "string (CSS animations for hero section)",
    "scrollAnimations": "string (scroll-triggered animations)",
    "hoverEffects": "string (interactive hover effects)",
    "transitionEffects": "string (smooth page transitions)"
  },
  "enhancedFeatures": {
    "contactForm": "string (functional contact form HTML/JS)",
    "skillsVisualization": "string (animated skills charts)",
    "projectGallery": "string (interactive project showcase)",
    "resumeDownload": "string (downloadable resume feature)"
  }
}"""

    parts = [f"Generate a complete, professional portfolio website: {request.prompt}."]
    if d.portfolioData:
        parts.append(f"Use this portfolio data: {json.dumps(d.portfolioData, ensure_ascii=False)}.")
    if d.fetchFromWeb:
        parts.append("Fetch real data from web sources, use current design trends, and incorporate industry best practices for portfolio websites.")
    if d.generateImages:
        parts.append("Generate high-quality, professional images from Unsplash for profile photos, project screenshots, company logos, and background visuals. Use URLs like https://images.unsplash.com/photo-[id]?w=800&h=600&fit=crop for relevant images.")
    if d.generateAnimations:
        parts.append("Include modern CSS animations, scroll-triggered effects, hover interactions, and smooth transitions throughout the website.")
    if d.generateLogos:
        parts.append("Generate or include company logos using https://logo.clearbit.com/[domain] format and skill icons from reliable CDNs.")
    if d.customStyling:
        parts.append("Apply custom styling with modern gradients, shadows, typography, and responsive design that works on all devices.")
    if d.generateWorkflows:
        parts.append("Include workflow diagrams and visual representations of development processes and project timelines.")
    if d.generateMindmap:
        parts.append("Create visual skill mindmaps and technology relationship diagrams.")
    parts.append("Make the website fully responsive, accessible, and optimized for performance. Include modern features like dark mode toggle, smooth scrolling, and professional animations.")
    return system, _join(parts)


def advertising_template_prompts(request: AdvertisingTemplateRequest) -> PromptPair:
    d = request.details
    system = """You are an expert marketing designer and copywriter. Generate comprehensive advertising templates with HTML/CSS code, marketing copy, and design specifications. Include color schemes, typography, and branding elements. Respond with JSON in this exact format: {
  "templateName": "string",
  "templateType": "string",
  "htmlCode": "string (complete HTML template)",
  "cssCode": "string (complete CSS styling)",
  "copyText": "string (marketing copy)",
  "colorScheme": {"primary": "string", "secondary": "string", "accent": "string", "background": "string"},
  "typography": {"headingFont": "string", "bodyFont": "string"},
  "assets": {"logoUrl": "string", "backgroundImage": "string", "iconSet": ["string"]},
  "brandGuidelines": "string",
  "downloadFiles": ["string"]
}"""

    parts = [f"Generate a professional advertising template: {request.prompt}."]
    if d.templateType:
        parts.append(f"Template type: {d.templateType}.")
    if d.contentData:
        parts.append(f"Content to promote: {json.dumps(d.contentData, ensure_ascii=False)}.")
    if d.generateLogos:
        parts.append("Include professional logo concepts and branding elements.")
    if d.colorGrading:
        parts.append("Apply professional color grading and visual hierarchy.")
    parts.append("Make it modern, professional, and conversion-focused.")
    return system, _join(parts)


def scholarship_prompts(request: ScholarshipRequest) -> PromptPair:
    d = request.details
    system = """You are an expert educational consultant with knowledge of scholarship programs in India and globally. Generate comprehensive, realistic scholarship information based on current opportunities. Respond with JSON in this exact format: {
  "title": "string",
  "description": "string (detailed description, minimum 100 characters)",
  "provider": "string",
  "amount": "string",
  "educationLevel": "string (upto-10th, 12th, btech, degree, or postgrad)",
  "eligibility": "string (detailed eligibility criteria, minimum 100 characters)",
  "deadline": "string (ISO date format YYYY-MM-DD)",
  "applicationUrl": "string",
  "category": "string (merit, need, minority, sports, or government)",
  "tags": ["string"],
  "benefits": "string (detailed benefits)",
  "requirements": "string (detailed requirements)",
  "howToApply": "string (step by step application process)",
  "isActive": true,
  "featured": boolean
}"""

    parts = [f"Generate a comprehensive scholarship program: {request.prompt}."]
    if d.fetchFromWeb:
        parts.append("Base this on real scholarship programs available in India from organizations like UGC, AICTE, state governments, and private foundations. Ensure all details are authentic and current.")
    if d.educationLevel:
        parts.append(f"Focus on scholarships for {d.educationLevel} students.")
    if d.category:
        parts.append(f"Category: {d.category}.")
    parts.append("Include realistic amounts in INR (e.g., ₹5,000 to ₹2,00,000), genuine application processes, appropriate deadlines (within next 3-6 months), and clear eligibility criteria. Make it helpful for Indian students with proper government/institutional URLs where applicable.")
    return system, _join(parts)


PROMPT_BUILDERS: Dict[str, Callable[..., PromptPair]] = {
    "job": job_prompts,
    "internship": job_prompts,
    "article": article_prompts,
    "roadmap": roadmap_prompts,
    "dsa-problem": dsa_problem_prompts,
    "dsa-topic": dsa_topic_prompts,
    "dsa-company": dsa_company_prompts,
    "dsa-sheet": dsa_sheet_prompts,
    "portfolio-website": portfolio_website_prompts,
    "advertising-template": advertising_template_prompts,
    "scholarship": scholarship_prompts,
}


# --- Non-dispatch prompts --------------------------------------------------

RESUME_ANALYSIS_SYSTEM = """You are an expert ATS (Applicant Tracking System) resume analyzer with deep knowledge of recruitment processes across industries. Analyze the resume comprehensively and provide actionable insights.
- atsScore is a number from 0 to 100.
- formatScore and readabilityScore are one of Excellent, Very Good, Good, Fair, Poor.
- analysis is a detailed narrative."""


def resume_analysis_prompt(resume_text: str, job_description: str = None) -> str:
    target = f"Target Job Description:\n{job_description}\n" if job_description else ""
    return f"""Analyze this resume comprehensively for ATS compatibility and career optimization:

Resume Content:
{resume_text}

{target}
Provide a thorough analysis including:
1. ATS compatibility score and keyword optimization
2. Industry detection and specific insights
3. Skills analysis (technical, soft, missing)
4. Experience progression and gap analysis
5. Prioritized improvement recommendations
6. Salary insights based on skills and experience
7. Format and readability assessment"""


TEXT_EXTRACTION_INSTRUCTION = (
    "Extract all text content from this resume/document. "
    "Return only the extracted text without any formatting or additional commentary."
)


FLOWCHART_SYSTEM = """You are an expert at creating interactive n8n-style learning workflows with multiple branches and paths. Generate a comprehensive workflow structure with multiple learning paths, decision points, nodes with rich detailed content and real external resource URLs.

Respond with JSON in this exact format:
{
  "nodes": [{
    "id": "string (unique like 'node-1')",
    "type": "string (input for start, output for end, default for others)",
    "position": {"x": number, "y": number},
    "data": {
      "label": "string (node title, max 6 words)",
      "description": "string (2-3 sentence summary visible on node)",
      "content": "string (detailed 4-6 paragraph explanation with examples)",
      "resources": ["string (5-10 real URLs to documentation, tutorials, courses)"],
      "redirectUrl": "string (main resource URL like https://react.dev/learn)",
      "color": "string (use different colors for different branches: #3b82f6, #10b981, #f59e0b, #ef4444, #8b5cf6)"
    }
  }],
  "edges": [{
    "id": "string (unique like 'edge-1-2')",
    "source": "string (id of an existing node)",
    "target": "string (id of an existing node)",
    "type": "smoothstep",
    "animated": true,
    "style": {"stroke": "string (color matching nodes)", "strokeWidth": 2}
  }]
}

LAYOUT RULES:
- Start node at x: 100, y: 400
- Space nodes horizontally 300-400px apart
- Create multiple vertical branches (y: 200, 400, 600) for parallel paths
- Include at least 15-25 nodes with multiple decision points
- Every edge source and target must be the id of a node in the nodes list"""


def flowchart_prompt(title: str, description: str, technologies: List[str], difficulty: str) -> str:
    return f"""Generate an interactive n8n-style learning workflow for this roadmap:

Title: {title}
Description: {description}
Technologies: {', '.join(technologies)}
Difficulty: {difficulty}

Create a workflow with MULTIPLE BRANCHES:
1. Start node (id: 'node-start', type: 'input')
2. 15-25 learning nodes: a main sequential path, advanced branches, parallel practice/project branches and optional deep dives
3. Colors: #3b82f6 basics, #8b5cf6 frameworks, #10b981 practice, #f59e0b advanced, #ef4444 milestones
4. End node (id: 'node-end', type: 'output')
5. Edges for the main flow plus branch and parallel connections, each {{id, source, target, type: 'smoothstep', animated: true}}
6. Real external URLs for every redirectUrl"""


IMPROVE_RESUME_SYSTEM = """You are an expert resume writer and career coach. Generate an improved version of the resume that:
1. Incorporates all suggested improvements
2. Adds missing keywords naturally
3. Uses strong action verbs and quantifiable achievements
4. Follows ATS-friendly formatting
5. Maintains professional language and tone
6. Organizes content logically and clearly

Format the resume in a clean, professional text format that can be easily copied."""


def improve_resume_prompt(original_text: str, suggestions: List[str], keyword_matches: List[str]) -> str:
    return f"""Original Resume:
{original_text}

Suggestions for Improvement:
{chr(10).join(suggestions)}

Missing Keywords to Include:
{', '.join(keyword_matches)}

Please generate an improved version of this resume incorporating all suggestions and keywords naturally."""


PARSE_RESUME_SYSTEM = """You are an expert resume parser that extracts structured data for portfolio creation. Parse the resume and extract relevant information for a professional portfolio. Respond with JSON in this exact format: {
  "name": "string",
  "title": "string (professional title/role)",
  "bio": "string (professional summary/bio)",
  "email": "string",
  "phone": "string",
  "website": "string",
  "linkedin": "string",
  "github": "string",
  "skills": ["string"],
  "projects": [{"title": "string", "description": "string", "technologies": ["string"], "demoUrl": "string", "githubUrl": "string"}],
  "experience": [{"title": "string", "company": "string", "duration": "string", "description": "string"}],
  "education": [{"degree": "string", "institution": "string", "year": "string", "grade": "string"}]
}"""


def parse_resume_prompt(resume_text: str) -> str:
    return f"""Parse this resume for portfolio data extraction:

Resume Content:
{resume_text}

Extract personal information and social links, professional title and bio, skills, work experience, education and projects. Clean up and format all data appropriately."""
