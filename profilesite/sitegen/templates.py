"""
HTML templates for the static profile site.

Placeholders use the `{{NAME}}` form and are filled by the generator.
"""

BASE_STYLE = """        * { margin: 0; padding: 0; box-sizing: border-box; }
        body {
            font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, "Helvetica Neue", Arial, sans-serif;
            background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
            min-height: 100vh;
            padding: 40px 20px;
        }"""

INDEX_TEMPLATE = """<!DOCTYPE html>
<html lang="ja">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>人物プロフィール一覧</title>
    <style>
""" + BASE_STYLE + """
        .container { max-width: 1200px; margin: 0 auto; }
        h1 {
            color: white;
            text-align: center;
            margin-bottom: 40px;
            font-size: 2.5rem;
            text-shadow: 2px 2px 4px rgba(0,0,0,0.2);
        }
        .profiles-grid {
            display: grid;
            grid-template-columns: repeat(auto-fill, minmax(300px, 1fr));
            gap: 30px;
        }
        .profile-card {
            background: white;
            border-radius: 15px;
            padding: 25px;
            text-decoration: none;
            color: inherit;
            transition: transform 0.3s ease, box-shadow 0.3s ease;
            box-shadow: 0 10px 30px rgba(0,0,0,0.1);
        }
        .profile-card:hover {
            transform: translateY(-5px);
            box-shadow: 0 15px 40px rgba(0,0,0,0.15);
        }
        .profile-image {
            width: 100%;
            height: 200px;
            object-fit: cover;
            border-radius: 10px;
            margin-bottom: 15px;
        }
        .profile-name { font-size: 1.5rem; font-weight: bold; margin-bottom: 5px; color: #333; }
        .profile-english {
            display: block;
            font-size: 0.9rem;
            font-weight: normal;
            color: #888;
            margin-top: 5px;
        }
        .profile-age { color: #666; font-size: 0.9rem; margin-bottom: 5px; }
        .profile-occupation { color: #666; margin-bottom: 10px; }
        .profile-bio { color: #888; line-height: 1.6; }
    </style>
</head>
<body>
    <div class="container">
        <h1>人物プロフィール一覧</h1>
        <div class="profiles-grid">
{{PROFILES}}
        </div>
    </div>
</body>
</html>
"""

PROFILE_CARD_TEMPLATE = """            <a href="{{LINK}}" class="profile-card">
                <img src="{{IMAGE}}" alt="{{NAME}}" class="profile-image">
                <div class="profile-name">{{NAME}}{{ENGLISH_NAME}}</div>
{{AGE_LINE}}                <div class="profile-occupation">{{OCCUPATION}}</div>
                <div class="profile-bio">{{BIO}}</div>
            </a>
"""

PROFILE_TEMPLATE = """<!DOCTYPE html>
<html lang="ja">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{{NAME}} - プロフィール</title>
    <style>
""" + BASE_STYLE + """
        .container {
            max-width: 800px;
            margin: 0 auto;
            background: white;
            border-radius: 20px;
            padding: 40px;
            box-shadow: 0 20px 60px rgba(0,0,0,0.1);
        }
        .back-link {
            display: inline-block;
            margin-bottom: 30px;
            color: #667eea;
            text-decoration: none;
            font-weight: 500;
        }
        .profile-header { display: flex; gap: 40px; margin-bottom: 40px; flex-wrap: wrap; }
        .profile-image {
            width: 250px;
            height: 250px;
            object-fit: cover;
            border-radius: 15px;
            box-shadow: 0 10px 30px rgba(0,0,0,0.1);
        }
        .profile-info { flex: 1; min-width: 250px; }
        .profile-name { font-size: 2.5rem; font-weight: bold; margin-bottom: 10px; color: #333; }
        .profile-meta { display: flex; flex-direction: column; gap: 10px; margin-bottom: 20px; }
        .meta-item { display: flex; align-items: center; gap: 10px; color: #666; }
        .meta-label { font-weight: 600; min-width: 80px; }
        .profile-bio { color: #555; line-height: 1.8; font-size: 1.1rem; }
        .skills-section { margin-top: 40px; }
        .section-title { font-size: 1.5rem; font-weight: bold; margin-bottom: 20px; color: #333; }
        .skills-grid { display: flex; flex-wrap: wrap; gap: 10px; }
        .skill-tag {
            background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
            color: white;
            padding: 8px 20px;
            border-radius: 25px;
            font-size: 0.9rem;
            font-weight: 500;
        }
    </style>
</head>
<body>
    <div class="container">
        <a href="index.html" class="back-link">← 一覧に戻る</a>
        <div class="profile-header">
            <img src="{{IMAGE}}" alt="{{NAME}}" class="profile-image">
            <div class="profile-info">
                <h1 class="profile-name">{{NAME}}</h1>
                <div class="profile-meta">
                    <div class="meta-item">
                        <span class="meta-label">年齢:</span>
                        <span>{{AGE}}</span>
                    </div>
                    <div class="meta-item">
                        <span class="meta-label">職業:</span>
                        <span>{{OCCUPATION}}</span>
                    </div>
                    <div class="meta-item">
                        <span class="meta-label">所在地:</span>
                        <span>{{LOCATION}}</span>
                    </div>
                </div>
                <p class="profile-bio">{{BIO}}</p>
            </div>
        </div>
{{SKILLS_SECTION}}    </div>
</body>
</html>
"""

SKILLS_SECTION_TEMPLATE = """        <div class="skills-section">
            <h2 class="section-title">スキル</h2>
            <div class="skills-grid">
                {{SKILL_TAGS}}
            </div>
        </div>
"""

SKILL_TAG_TEMPLATE = '<span class="skill-tag">{{SKILL}}</span>'
